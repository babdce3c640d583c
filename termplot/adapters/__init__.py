from .ingest import parse_line, parse_token, read_rows

__all__ = ["parse_line", "parse_token", "read_rows"]
