"""Infrastructure: HTTP transport, cookie persistence and HTML parsers."""
