"""HTTP server for docstruct."""
