def contains_pattern(text: str) -> str:
    """ILIKE pattern matching ``text`` anywhere, with LIKE wildcards taken literally"""
    escaped = text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'
