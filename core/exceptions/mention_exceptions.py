"""Exceptions raised by the mention notification pipeline."""


class MentionDispatchError(Exception):
    """Dispatching mention notifications for a post failed."""

    def __init__(self, post_id: int, failed_targets: list[str]):
        """Initialize dispatch error.

        Args:
            post_id: Post whose notifications failed
            failed_targets: Labels of the recipient targets that failed
        """
        self.post_id = post_id
        self.failed_targets = failed_targets
        super().__init__(
            f"Mention dispatch for post {post_id} failed for targets: "
            f"{', '.join(failed_targets)}"
        )
