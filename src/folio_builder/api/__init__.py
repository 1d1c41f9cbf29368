"""HTTP API for Folio Builder."""
