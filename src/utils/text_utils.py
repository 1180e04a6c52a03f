def normalize(text: str | None) -> str:
    """Lowercase and strip *text*; ``None`` becomes ``""``."""
    return (text or "").lower().strip()


def tokenize(text: str | None) -> list[str]:
    """Split the normalized *text* on whitespace, keeping duplicates."""
    return normalize(text).split()
