import random

COVERS_PREFIX = "/covers"

INTERVIEW_COVERS = [
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
]


def get_random_interview_cover() -> str:
    return f"{COVERS_PREFIX}{random.choice(INTERVIEW_COVERS)}"
