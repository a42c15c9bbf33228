"""FastAPI surface for the voice platform webhook."""
