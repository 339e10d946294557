from typing import Any

FOLLOW_UP_PROMPT = "Are you sure? Think carefully."


def _as_prompt_text(value: Any) -> str:
    if isinstance(value, list):
        return ",".join(str(item) for item in value)
    return str(value)


def build_interview_prompt(role: Any, level: Any, techstack: Any, type: Any, amount: Any) -> str:
    return f"""
        Prepare questions for a job interview.
        The job role is {_as_prompt_text(role)}.
        The job experience level is {_as_prompt_text(level)}.
        The tech stack used in the job is: {_as_prompt_text(techstack)}.
        The focus between behavioural and technical questions should lean towards: {_as_prompt_text(type)}.
        The amount of questions required is: {_as_prompt_text(amount)}.
        STRICT RULES:
        1. Absolutely NO punctuation in any question
           This means no commas periods semicolons colons question marks slashes hyphens quotes or any special symbols
        2. Only alphabet letters and spaces are allowed
        3. Do NOT number the questions
        4. Do NOT add explanations
        5. Return ONLY a valid JSON array of plain text strings such as:
        ["Describe event loop in javascript", "Explain react state management"]

        Your entire response must be valid JSON with no trailing text.


        Thank you! <3
"""
