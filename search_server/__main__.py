"""
Command line entry point: index a text file and run one query.

Usage:
    python -m search_server DOCUMENTS_FILE "QUERY" [STATUS]

Each non-empty line of DOCUMENTS_FILE is one ACTUAL document without
ratings; its id is the 0-based line number. STATUS filters results
(default: ACTUAL). Settings come from .env.local / .env / SEARCH_* vars.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .document import DocumentStatus
from .errors import SearchServerError
from .logging_config import setup_logging
from .server import SearchServer

logger = logging.getLogger(__name__)

USAGE = 'Usage: python -m search_server DOCUMENTS_FILE "QUERY" [ACTUAL|IRRELEVANT|BANNED|REMOVED]'


def load_documents(server: SearchServer, documents_file: Path) -> int:
    """Add every non-empty line of documents_file; returns the number added."""
    added = 0
    with open(documents_file, encoding="utf-8") as f:
        for document_id, line in enumerate(f):
            text = line.rstrip("\n")
            if not text.strip(" "):
                continue
            server.add_document(document_id, text, DocumentStatus.ACTUAL, [])
            added += 1
    return added


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (2, 3):
        print(USAGE, file=sys.stderr)
        return 2
    
    documents_file, raw_query = Path(args[0]), args[1]
    try:
        status = DocumentStatus[args[2].upper()] if len(args) == 3 else DocumentStatus.ACTUAL
    except KeyError:
        print(f"Unknown status: {args[2]}\n{USAGE}", file=sys.stderr)
        return 2
    
    settings = load_settings()
    setup_logging(log_file=settings.log_file, console_level=settings.console_level)
    server = SearchServer.from_settings(settings)
    
    try:
        added = load_documents(server, documents_file)
        logger.info(f"Indexed {added} documents from {documents_file}")
        found_docs = server.find_top_documents(raw_query, status)
    except (OSError, SearchServerError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    for doc in found_docs:
        print(f"{{ document_id = {doc.id}, relevance = {doc.relevance:.6f}, rating = {doc.rating} }}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
