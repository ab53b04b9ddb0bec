"""
Casework Coach - Prompt Logger.

Writes each generation call (system prompt, user prompt with the assembled
knowledge context, and the model's text) to a markdown file so prompt
changes can be reviewed side by side. Files are grouped per process run:

    prompt_logs/<YYYYmmdd_HHMMSS>/01_case_plan.md
    prompt_logs/<YYYYmmdd_HHMMSS>/02_research.md

Switched on with CASEWORK_LOG_PROMPTS=1 or `casework plan --log-prompts`.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

LOG_PROMPTS = os.getenv("CASEWORK_LOG_PROMPTS", "0") == "1"
LOG_DIR = Path("prompt_logs")

SAMPLING_KEYS = ("temperature", "max_tokens")


@dataclass
class _Run:
    started: str
    calls: int = 0

    @property
    def directory(self) -> Path:
        return LOG_DIR / self.started


_run: _Run | None = None


def _current_run() -> _Run:
    global _run
    if _run is None:
        _run = _Run(started=datetime.now().strftime("%Y%m%d_%H%M%S"))
    return _run


def enable_prompt_logging(enabled: bool = True) -> None:
    global LOG_PROMPTS
    LOG_PROMPTS = enabled


def is_enabled() -> bool:
    return LOG_PROMPTS


def _fenced(title: str, body: str) -> str:
    return f"## {title}\n\n```\n{body}\n```\n"


def _render(
    task: str,
    model: str,
    system_prompt: str,
    user_prompt: str,
    response: str | None,
    error: str | None,
    config: dict | None,
) -> str:
    header = [f"# LLM Call: {task}", "", f"**Time:** {datetime.now().isoformat()}", f"**Model:** {model}"]
    sampling = [f"{key}={config[key]}" for key in SAMPLING_KEYS if config and key in config]
    if sampling:
        header.append(f"**Config:** {', '.join(sampling)}")

    if error:
        outcome = f"**ERROR:** {error}"
    else:
        outcome = response or "(Empty response)"

    sections = [
        "\n".join(header) + "\n",
        _fenced("System Prompt", system_prompt),
        _fenced("User Prompt", user_prompt),
        f"## Response\n\n{outcome}\n",
    ]
    return "\n---\n\n".join(sections)


def log_prompt(
    *,
    task: str,
    model: str,
    system_prompt: str,
    user_prompt: str,
    response: str | None = None,
    error: str | None = None,
    config: dict | None = None,
) -> Path | None:
    """
    Write one call to the current run's directory.

    Files are numbered in call order and named after the task. `error`
    takes the place of the response when the provider call failed. Only
    the sampling settings (temperature, max_tokens) are taken from `config`.

    Returns the file written, or None while logging is off.
    """
    if not LOG_PROMPTS:
        return None

    run = _current_run()
    run.calls += 1
    run.directory.mkdir(parents=True, exist_ok=True)

    path = run.directory / f"{run.calls:02d}_{task}.md"
    path.write_text(
        _render(task, model, system_prompt, user_prompt, response, error, config),
        encoding="utf-8",
    )
    return path


def get_session_log_dir() -> Path | None:
    """Directory for this run's logs, or None while logging is off."""
    if not LOG_PROMPTS:
        return None
    directory = _current_run().directory
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def reset_session() -> None:
    """Start a new run: fresh directory, numbering from 01."""
    global _run
    _run = None
