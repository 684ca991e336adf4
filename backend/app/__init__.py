"""
Resume MVP API.

Run the server with:
    uvicorn app.main:app --reload --port 8000
"""

__version__ = "0.1.0"
