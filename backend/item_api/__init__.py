"""In-memory item CRUD service served over HTTP as JSON."""
