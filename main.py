"""
Author Directory Viewer

Boots the fetch-render-disclosure pipeline against the configured directory API,
optionally selects an author, and writes the rendered page to disk.
"""

import argparse
import asyncio
import logging

from config import OUTPUT_CONFIG
from services.author_directory import DataGateway, DirectoryClient, RefreshOrchestrator
from services.author_directory.view import HtmlRenderer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run(user_id=None, output_path=None) -> str:
    """
    Bootstrap the view, select an author if given, and render the page.

    Args:
        user_id: Author to select after bootstrap
        output_path: Where to write the HTML page

    Returns:
        Path of the written page
    """
    async with DirectoryClient() as client:
        orchestrator = RefreshOrchestrator(DataGateway(client))

        await orchestrator.bootstrap()
        if user_id:
            await orchestrator.select_author(user_id)

        return HtmlRenderer().write(orchestrator.state, output_path)


def main():
    parser = argparse.ArgumentParser(description="Render an author's posts with collapsible comments")
    parser.add_argument("--user-id", type=int, help="Author to select after loading")
    parser.add_argument("--output", default=OUTPUT_CONFIG["output_path"], help="HTML output path")
    args = parser.parse_args()

    path = asyncio.run(run(args.user_id, args.output))
    logger.info(f"Done: {path}")


if __name__ == "__main__":
    main()
