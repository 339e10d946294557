from datetime import datetime, timezone

import pytest

from app.core.prompts import build_interview_prompt
from app.core.use_case import normalize_techstack, utc_timestamp


@pytest.mark.parametrize(
    "techstack, expected",
    [
        ("React,Node", ["React", "Node"]),
        ("React", ["React"]),
        (["React", "Node"], ["React", "Node"]),
        (None, []),
        (42, []),
        ({"React": True}, []),
    ],
)
def test_normalize_techstack(techstack, expected):
    assert normalize_techstack(techstack) == expected


def test_utc_timestamp_is_iso_8601():
    stamp = utc_timestamp()

    assert stamp.endswith("Z")
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert parsed.tzinfo == timezone.utc
    assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 60


def test_prompt_mentions_every_request_field():
    prompt = build_interview_prompt(role="Data Engineer", level="senior", techstack="Spark,Airflow",
                                    type="behavioural", amount=7)

    assert "The job role is Data Engineer." in prompt
    assert "The job experience level is senior." in prompt
    assert "The tech stack used in the job is: Spark,Airflow." in prompt
    assert "lean towards: behavioural." in prompt
    assert "The amount of questions required is: 7." in prompt
    assert "JSON array" in prompt


def test_prompt_ends_with_thanks():
    prompt = build_interview_prompt(role="QA", level="mid", techstack="Cypress", type="mixed", amount=3)

    assert prompt.rstrip().endswith("Thank you! <3")
