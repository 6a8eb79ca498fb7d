"""Telegram Bot API check harness.

Manual smoke checks that call Bot API methods through python-telegram-bot
and verify that values written are read back unchanged.

The package is split into:
- Configuration and check fixtures
- Throttled client construction
- Check sequences (descriptions, stickers, sticker sets)
- Check selection and the command line entry point
"""
