"""Data model of parsed templates and the params types they bind to."""
