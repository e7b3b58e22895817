"""
HTML Renderer

This module serializes the mounted view tree to an HTML page with a Jinja2 template.
"""

import os
import logging
from jinja2 import Environment, FileSystemLoader, Template

from config import OUTPUT_CONFIG, VIEW_CONFIG
from .state import ViewState

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Renders a ViewState to HTML."""

    def __init__(self):
        """Initialize the renderer with the templates directory next to this module."""
        templates_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

        # Create Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )

        logger.info(f"HtmlRenderer initialized with templates directory: {templates_dir}")

    def load_template(self, template_name: str) -> Template:
        try:
            return self.env.get_template(template_name)
        except Exception as e:
            logger.error(f"Error loading template {template_name}: {e}")
            raise

    def render(self, state: ViewState, title: str = None) -> str:
        """
        Render the whole document the state belongs to.

        Args:
            state: View state whose root is rendered
            title: Page title (default: from config)

        Returns:
            HTML page as a string
        """
        template = self.load_template(OUTPUT_CONFIG["template_name"])
        return template.render(root=state.root, title=title or VIEW_CONFIG["page_title"])

    def write(self, state: ViewState, path: str = None) -> str:
        """
        Render the document and write it to disk.

        Args:
            state: View state to render
            path: Output file (default: from config)

        Returns:
            Path written to
        """
        path = path or OUTPUT_CONFIG["output_path"]
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render(state))

        logger.info(f"Rendered page written to {path}")
        return path
