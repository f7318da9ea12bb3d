"""Warning output for the strseq CLI.

Commands report soft problems (an empty sequence, a value not found) with
`warn`, which writes to stderr so the command's stdout stays parseable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if stderr's encoding can represent ``character``."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return ``"⚠️"``, or ``"[!]"`` when stderr cannot encode it."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Write ``msg`` to stderr in bold yellow behind the caution glyph.

    Example:
        ``⚠️  Sequence is empty; min/max omitted.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)
