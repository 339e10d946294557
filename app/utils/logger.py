import json
import logging
import sys
from typing import Any, Dict

from colorama import Fore, Style, init

init(autoreset=True)


class GenerationLogger:
    """Console trace of the generation pipeline, one coloured line per step."""

    COLORS = {
        "Handler": Fore.CYAN,
        "OpenRouter": Fore.MAGENTA,
        "Extractor": Fore.YELLOW,
        "Storage": Fore.GREEN,
        "System": Fore.WHITE
    }

    PREFIXES = {
        "Handler": "[LOG :: HANDLER]",
        "OpenRouter": "[LOG :: OPENROUTER]",
        "Extractor": "[LOG :: EXTRACTOR]",
        "Storage": "[LOG :: STORAGE]",
        "System": "[LOG :: SYSTEM]"
    }

    def __init__(self, name: str = "interview_generator"):
        self._setup_logger(name)

    def _setup_logger(self, name: str):
        logger = logging.getLogger(name)
        logger.setLevel(logging.INFO)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter('%(message)s')
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        self.logger = logger

    def _get_color(self, step: str) -> str:
        return self.COLORS.get(step, Fore.WHITE)

    def log(self, step: str, message: str, data: Dict[str, Any] | None = None):
        color = self._get_color(step)
        prefix = self.PREFIXES.get(step, f"[LOG :: {step.upper()}]")

        formatted_msg = f"{color}{prefix}{Style.RESET_ALL} {message}"
        if data:
            formatted_msg += f" | Data: {json.dumps(data, ensure_ascii=False, default=str)}"

        self.logger.info(formatted_msg)

    def log_tokens(self, prompt_tokens: int, completion_tokens: int):
        self.log("System", f"[METRIC :: TOKENS] +{prompt_tokens} prompt, +{completion_tokens} completion")

    def log_latency(self, latency_ms: float):
        self.log("System", f"[METRIC :: LATENCY] {latency_ms:.2f}ms")

    def log_usage(self, usage: Any):
        if not isinstance(usage, dict):
            return
        prompt_tokens = usage.get("prompt_tokens")
        completion_tokens = usage.get("completion_tokens")
        if isinstance(prompt_tokens, int) and isinstance(completion_tokens, int):
            self.log_tokens(prompt_tokens, completion_tokens)
