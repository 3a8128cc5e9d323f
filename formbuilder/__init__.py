"""Form builder backend: reusable form structures and stored submissions."""
