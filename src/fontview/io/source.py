"""Borrowed and owned font data.

A font handle sits on top of exactly one of these holders:

- BorrowedFontData: a parsed view over bytes the caller keeps. The caller
  must not mutate a borrowed ``bytearray`` while fonts built on it are alive.
- OwnedFontData: the holder takes the buffer over. It keeps an immutable
  ``bytes`` snapshot together with the view decoded from that very object,
  so the view can never outlive or diverge from its bytes.

Both expose the same ``view`` attribute, which is all the font handle uses.
"""

from dataclasses import dataclass, field

from fontview.exceptions import FontDecodeError
from fontview.io.decoder import BytesLike, ParsedFont


@dataclass(frozen=True, eq=False)
class BorrowedFontData:
    """Parsed view over caller-retained bytes."""

    view: ParsedFont

    @classmethod
    def from_bytes(cls, data: BytesLike, index: int = 0) -> "BorrowedFontData":
        """Decode ``data`` without taking ownership of it.

        Raises:
            FontDecodeError: If the data is not a usable font at ``index``
        """
        return cls(view=ParsedFont.decode(data, index))

    @classmethod
    def try_from_bytes(cls, data: BytesLike, index: int = 0) -> "BorrowedFontData | None":
        view = ParsedFont.parse(data, index)
        if view is None:
            return None
        return cls(view=view)

    @property
    def data(self) -> BytesLike:
        return self.view.source

    @property
    def is_owned(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class OwnedFontData:
    """Font bytes owned together with the view decoded from them.

    Attributes:
        data: Immutable font bytes, never replaced after construction
        view: Parsed view whose source is ``data`` itself
    """

    data: bytes = field(repr=False)
    view: ParsedFont

    def __post_init__(self) -> None:
        if self.view.source is not self.data:
            raise ValueError("OwnedFontData view must be decoded from its own data")

    @classmethod
    def from_buffer(cls, buffer: BytesLike, index: int = 0) -> "OwnedFontData":
        """Take ownership of ``buffer`` and decode it.

        The buffer is snapshotted into ``bytes`` (a ``bytes`` argument is kept
        as is) before decoding, so later writes to a caller ``bytearray`` can
        never reach the font. Decoding runs over the snapshot, and the holder
        only comes into existence once decoding succeeded.

        Args:
            buffer: Font bytes to take over
            index: Font number inside a collection

        Returns:
            OwnedFontData holding the snapshot and its view

        Raises:
            FontDecodeError: If the data is not a usable font at ``index``
        """
        data = bytes(buffer)
        view = ParsedFont.decode(data, index)
        return cls(data=data, view=view)

    @classmethod
    def try_from_buffer(cls, buffer: BytesLike, index: int = 0) -> "OwnedFontData | None":
        try:
            return cls.from_buffer(buffer, index)
        except FontDecodeError:
            return None

    @property
    def is_owned(self) -> bool:
        return True


FontData = BorrowedFontData | OwnedFontData
