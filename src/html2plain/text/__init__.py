"""Character level helpers: case emphasis, entity decoding and line layout."""
