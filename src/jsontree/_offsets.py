"""Character offset mapping for diagnostics: UTF-8 byte offsets and line/column."""

from __future__ import annotations

from typing import Final

ASCII_LIMIT: Final = 127


class OffsetMapper:
    """Maps character offsets in a document to UTF-8 byte offsets.

    Rather than storing the byte offset of every character, the mapper keeps
    a checkpoint every ``checkpoint_interval`` characters and walks forward
    from the nearest one. Pure-ASCII documents skip the walk entirely since
    character and byte offsets coincide.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """Build checkpoints for ``text``.

        Args:
            text: The document the offsets refer to
            checkpoint_interval: Characters between checkpoints (default 256)
        """
        if checkpoint_interval <= 0:
            raise ValueError("checkpoint_interval must be positive")

        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        # checkpoint i covers character i * checkpoint_interval
        self._byte_checkpoints: list[int] = []
        self.is_ascii = text.isascii()

        if not self.is_ascii:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        byte_pos = 0
        for char_pos, char in enumerate(self.text):
            if char_pos % self.checkpoint_interval == 0:
                self._byte_checkpoints.append(byte_pos)
            byte_pos += _utf8_width(char)
        self._total_bytes = byte_pos

    def char_to_byte(self, char_pos: int) -> int:
        """Convert a character offset to a UTF-8 byte offset.

        Offsets past the end of the text clamp to the encoded length.
        """
        if char_pos < 0:
            raise ValueError("char_pos must be a non-negative integer")
        if self.is_ascii:
            return min(char_pos, len(self.text))
        if char_pos >= len(self.text):
            return self._total_bytes

        slot = char_pos // self.checkpoint_interval
        byte_pos = self._byte_checkpoints[slot]
        for i in range(slot * self.checkpoint_interval, char_pos):
            byte_pos += _utf8_width(self.text[i])
        return byte_pos

    def line_col(self, char_pos: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of a character offset."""
        lineno = self.text.count("\n", 0, char_pos) + 1
        colno = char_pos - self.text.rfind("\n", 0, char_pos)
        return lineno, colno


def _utf8_width(char: str) -> int:
    code_point = ord(char)
    if code_point <= ASCII_LIMIT:
        return 1
    if code_point <= 0x7FF:
        return 2
    if code_point <= 0xFFFF:
        return 3
    return 4
