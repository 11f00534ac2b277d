SPAWN_X = 100
SPAWN_Y = 100

DEFAULT_STATE = "idle"
DEFAULT_DIRECTION = "right"

# Chat nickname used when the sender has not joined (or already left).
UNKNOWN_NICKNAME = "알 수 없음"

# Signaling events and the key naming the sender in the forwarded payload.
SIGNAL_SENDER_KEYS: dict[str, str] = {
    "webrtc_offer": "caller",
    "webrtc_answer": "callee",
    "webrtc_ice_candidate": "sender",
}

__all__ = [
    "SPAWN_X",
    "SPAWN_Y",
    "DEFAULT_STATE",
    "DEFAULT_DIRECTION",
    "UNKNOWN_NICKNAME",
    "SIGNAL_SENDER_KEYS",
]
