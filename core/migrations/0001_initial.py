from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SentMention",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("set_key", models.CharField(db_index=True, max_length=64)),
                ("user_id", models.BigIntegerField()),
                ("score", models.BigIntegerField()),
            ],
            options={
                "db_table": "sent_mentions",
                "ordering": ["set_key", "score"],
            },
        ),
        migrations.AddConstraint(
            model_name="sentmention",
            constraint=models.UniqueConstraint(
                fields=("set_key", "user_id"), name="unique_sent_mention_member"
            ),
        ),
    ]
