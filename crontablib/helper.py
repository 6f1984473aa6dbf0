"""Small formatting helpers shared by crontab entries."""


def export_comment(comment: str) -> str:
    """Render a comment as crontab comment lines, one ``#`` per line.

    An empty comment produces an empty string.
    """
    if not comment:
        return ""
    return "".join(f"#{line}\n" for line in comment.split("\n"))