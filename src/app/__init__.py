"""FastAPI surface for the bookmark demo map."""
