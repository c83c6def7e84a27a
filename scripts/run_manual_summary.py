#!/usr/bin/env python3
"""
Manual Workflow Script

Runs a transcript file through the summarize-and-share workflow against the
backend at API_BASE_URL, and optionally emails the resulting summary.

Usage:
    python scripts/run_manual_summary.py transcript.txt "Highlight action items" [a@x.com,b@y.com]
"""

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.workflow_controller import WorkflowController  # noqa: E402


async def run_workflow(transcript_path: Path, prompt: str, recipients: str) -> bool:
    """Summarize the transcript and, if recipients are given, send it."""
    controller = WorkflowController()
    print("=" * 60)
    print("MANUAL WORKFLOW RUN")
    print("=" * 60)
    print(f"Backend: {controller.summarization_client.base_url}")

    try:
        controller.set_transcript(transcript_path.read_text(encoding="utf-8"))
        controller.set_prompt(prompt)
        print(f"  Transcript length: {len(controller.state.transcript)} characters")
        print(f"  Prompt: {prompt}")
        print()

        print("Requesting summary...")
        status = await controller.validate_and_summarize()
        print(f"Status: {status.text}")
        if status.is_error:
            return False

        print("-" * 60)
        print(controller.state.summary)
        print("-" * 60)

        if not recipients:
            return True

        controller.set_recipients(recipients)
        print(f"Sending to: {', '.join(controller.state.recipients) or '(none valid)'}")
        status = await controller.validate_and_send()
        print(f"Status: {status.text}")
        return not status.is_error
    finally:
        await controller.aclose()


if __name__ == "__main__":
    load_dotenv()

    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(2)

    transcript_file = Path(sys.argv[1])
    if not transcript_file.exists():
        print(f"ERROR: Transcript file not found: {transcript_file}")
        sys.exit(1)

    ok = asyncio.run(run_workflow(
        transcript_file,
        sys.argv[2],
        sys.argv[3] if len(sys.argv) > 3 else ""
    ))

    print("=" * 60)
    print("RUN COMPLETED SUCCESSFULLY" if ok else "RUN FAILED")
    print("=" * 60)
    sys.exit(0 if ok else 1)
