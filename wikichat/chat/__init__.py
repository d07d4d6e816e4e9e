"""Chat replies built from resolved Wikipedia articles."""

from wikichat.chat.reply import ChatReply, SourceInfo, build_reply
from wikichat.chat.service import ChatService

__all__ = ["ChatReply", "ChatService", "SourceInfo", "build_reply"]
