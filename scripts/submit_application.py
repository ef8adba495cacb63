#!/usr/bin/env python3
"""
CLI front end for the job application form.

Renders the application form in a terminal: collects name, email and phone
number (prompting for any that are not given as options), attaches a CV,
validates everything, and submits it to the submission proxy.

Usage:
    python scripts/submit_application.py --cv resume.pdf
    python scripts/submit_application.py --name "Jane Doe" --email jane@x.com \\
        --phone +1234567890 --cv resume.docx --base-url http://localhost:8000

Exit codes:
    0 - application accepted
    1 - validation failed or CV rejected by the picker
    2 - submission failed (proxy or worker error)
"""

import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

import httpx

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.client.application_form import ApplicationForm
from src.domain.intake.constants import ACCEPTED_CV_EXTENSIONS
from src.domain.intake.value_objects.cv_file import CvFile

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Submit a job application (name, email, phone, CV)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for text fields, attach a PDF
  python scripts/submit_application.py --cv resume.pdf

  # Fully non-interactive against a remote proxy
  python scripts/submit_application.py --name "Jane Doe" --email jane@x.com \\
      --phone +1234567890 --cv resume.docx --base-url https://careers.example.com
        """,
    )

    parser.add_argument("--name", type=str, default=None, help="Full name")
    parser.add_argument("--email", type=str, default=None, help="Email address")
    parser.add_argument("--phone", type=str, default=None, help="Phone number")
    parser.add_argument(
        "--cv",
        type=Path,
        default=None,
        help=f"Path to the resume ({', '.join(sorted(ACCEPTED_CV_EXTENSIONS))})",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default="http://localhost:8000",
        help="Submission proxy base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def load_cv(path: Path) -> CvFile:
    """Read a file from disk as a CvFile, guessing its MIME type from the name."""
    content_type, _ = mimetypes.guess_type(path.name)
    return CvFile(
        filename=path.name,
        content_type=content_type or "application/octet-stream",
        content=path.read_bytes(),
    )


def fill_text_fields(form: ApplicationForm, args) -> None:
    """Copy text options into the form, prompting for the missing ones."""
    for field, value, label in (
        ("name", args.name, "Full Name"),
        ("email", args.email, "Email"),
        ("phone_number", args.phone, "Phone Number"),
    ):
        if value is None:
            value = input(f"{label}: ")
        form.update_field(field, value)


async def main():
    """Main execution function."""
    args = parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    form = ApplicationForm()
    fill_text_fields(form, args)

    if args.cv is not None:
        try:
            cv = load_cv(args.cv)
        except OSError as e:
            logger.error(f"Cannot read CV file {args.cv}: {e}")
            sys.exit(1)

        if form.select_files([cv]):
            print(f"Selected file: {cv.filename}")
        else:
            print("Please make sure to upload a PDF or DOCX")

    if not form.validate():
        for field, message in form.errors.items():
            print(f"  {field}: {message}")
        sys.exit(1)

    print("Submitting...")
    async with httpx.AsyncClient(base_url=args.base_url, timeout=None) as client:
        accepted = await form.submit(client)

    print(form.message)
    sys.exit(0 if accepted else 2)


if __name__ == "__main__":
    asyncio.run(main())
