"""
Knowledge base - Entry point.

Usage:
    python main.py                      # Run CLI help
    python main.py list                 # List documents
    python main.py analyze my-note.md   # Analyze a document
    python main.py search react hooks   # Search the knowledge base
"""

from knowledge.cli.main import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
