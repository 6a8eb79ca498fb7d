"""Bot API check sequences.

Each check writes values through the Bot API and verifies they are read back
unchanged:
- DescriptionCheck: bot full and short description per locale
- SendStickerCheck: sending a sticker with an associated emoji
- StickerSetCheck: creating, retitling and extending a sticker set
"""

from .base import BaseCheck
from .descriptions import DescriptionCheck
from .sticker_set import StickerSetCheck
from .stickers import SendStickerCheck

__all__ = [
    'BaseCheck',
    'DescriptionCheck',
    'SendStickerCheck',
    'StickerSetCheck',
]
