#!/usr/bin/env python3
"""Create an invitation, render it and save the image locally.

Downloads land in DISTRIBUTION__DOWNLOAD_DIR (default ``downloads/``).

Example:
    python scripts/render_invitation.py "Ana Torres" --guests 3 --format webp
"""

import argparse
import asyncio
import os
import sys
from uuid import UUID

import logfire
from pydantic import ValidationError

from gatepass.application.session import InvitationSession, SessionState
from gatepass.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
)
from gatepass.config import Settings
from gatepass.domain.service import InvitationService
from gatepass.domain.value import DistributionStatus, ImageFormat, InvitationId
from gatepass.util.di.container import create_script_container
from gatepass.util.logging import setup_logging
from gatepass.util.observability import configure_logfire


async def render(name: str, guests: int, is_frequent: bool) -> int:
    container = create_script_container()
    try:
        async with container() as request_container:
            create_invitation = await request_container.get(CreateInvitationUseCase)
            invitation_service = await request_container.get(InvitationService)
            session = await request_container.get(InvitationSession)

            response = await create_invitation.execute(
                CreateInvitationRequest(
                    name=name, guest_count=guests, is_frequent=is_frequent
                )
            )
            invitation = await invitation_service.get_invitation(
                InvitationId(UUID(response.invitation.id))
            )

            session.show(invitation)
            await session.drain()
            if session.state != SessionState.READY:
                print(f"Render failed: {session.error}", file=sys.stderr)
                return 1

            result = await session.download()
            if result.status != DistributionStatus.SUCCEEDED:
                print(f"Download failed: {result.message}", file=sys.stderr)
                return 1

            print(f"Saved {result.filename}")
            return 0
    finally:
        await container.close()


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Render a visitor invitation")
    parser.add_argument("name", help="Guest name (2-50 characters)")
    parser.add_argument("--guests", type=int, default=0, help="Companions (0-10)")
    parser.add_argument("--frequent", action="store_true", help="Frequent visitor")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ImageFormat],
        help="Image format (defaults to ARTIFACT__FORMAT)",
    )
    args = parser.parse_args()

    if args.format:
        # Settings are read from the environment inside the container
        os.environ["ARTIFACT__FORMAT"] = args.format

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        return asyncio.run(render(args.name, args.guests, args.frequent))
    except ValidationError as e:
        logfire.warn("Invalid invitation", error=str(e))
        print(e, file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
