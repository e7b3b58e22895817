"""
Configuration file for Author Directory Viewer
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Remote data source (REST-shaped, read-only)
API_CONFIG = {
    "base_url": os.getenv("DIRECTORY_API_BASE_URL", "https://jsonplaceholder.typicode.com"),
    # Seconds before a single remote read is abandoned
    "timeout": float(os.getenv("DIRECTORY_API_TIMEOUT", "10")),
    "user_agent": os.getenv("DIRECTORY_USER_AGENT", "python:author-directory:v1.0")
}

# View configuration
VIEW_CONFIG = {
    "default_text": os.getenv(
        "VIEW_DEFAULT_TEXT",
        "Select an Employee to display their posts."
    ),
    "default_text_class": "default-text",
    "show_label": "Show Comments",
    "hide_label": "Hide Comments",
    "comments_class": "comments",
    "hidden_class": "hide",
    "author_unavailable_text": "Author unavailable",
    "author_unavailable_class": "author-unavailable",
    # Fallback author when the selector has no value
    "fallback_user_id": int(os.getenv("VIEW_FALLBACK_USER_ID", "1")),
    "selector_id": "selectMenu",
    "page_title": os.getenv("VIEW_PAGE_TITLE", "Employee Posts")
}

# Rendered page output
OUTPUT_CONFIG = {
    "output_path": os.getenv("VIEW_OUTPUT_PATH", "reports/posts.html"),
    "template_name": "page.html.j2"
}
