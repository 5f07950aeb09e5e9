"""
Garvis 메시지 처리 계층

Classes:
    GarvisBot: 전송 계층과 무관한 메시지 처리 (도움말/상태/사과 메시지)
    SlackTransport: Slack Socket Mode 연동
"""

from .garvis_bot import APOLOGY_MESSAGE, BotReply, GarvisBot, Transport
from .slack_transport import SlackTransport

__all__ = ["APOLOGY_MESSAGE", "BotReply", "GarvisBot", "Transport", "SlackTransport"]
