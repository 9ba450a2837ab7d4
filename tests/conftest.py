# tests/conftest.py

import pytest

from DiscordRPC.metrics import reset_counters


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def user_payload() -> dict:
    return {
        "id": "175928847299117063",
        "username": "meew0",
        "discriminator": "3451",
        "avatar": "a_3b2f0f4b5c6d7e8f9a0b1c2d3e4f5a6b",
        "bot": False,
    }


@pytest.fixture
def member_payload(user_payload) -> dict:
    return {
        "user": user_payload,
        "nick": "mew",
        "status": "online",
        "activity": {"name": "Factorio", "type": 0},
    }


@pytest.fixture
def server_payload(member_payload) -> dict:
    return {
        "id": "81384788765712384",
        "name": "Discord API",
        "icon_url": "https://cdn.discordapp.com/icons/81384788765712384/2aab26934e72b4ec300c5aa6cf67c7b3.jpg",
        "members": [member_payload],
    }


@pytest.fixture
def voice_user_payload(user_payload) -> dict:
    return {
        "user": user_payload,
        "nick": "mew",
        "mute": False,
        "volume": 100,
        "pan": {"left": 1.0, "right": 1.0},
        "voice_state": {
            "mute": False,
            "deaf": False,
            "self_mute": True,
            "self_deaf": False,
            "suppress": False,
        },
    }


@pytest.fixture
def message_payload(user_payload) -> dict:
    return {
        "id": "199737254929760256",
        "blocked": False,
        "bot": None,
        "content": "test message",
        "content_parsed": [{"type": "text", "content": "test message"}],
        "author_color": "#FAA61A",
        "timestamp": "2016-07-05T04:30:50.776000+00:00",
        "tts": False,
        "mentions": ["81384788765712384"],
        "mention_roles": [],
        "embeds": [],
        "attachments": [],
        "author": user_payload,
        "nick": None,
        "pinned": False,
        "type": 0,
    }
