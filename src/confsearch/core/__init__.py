"""Search pipeline: configuration, query, HTTP, mapping and rendering."""
