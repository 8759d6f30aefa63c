"""Character-oriented string operations built on the UTF-8 engine.

Each operation obtains the character sequence from `utf8kit.engine.split`
(so malformed bytes are silently dropped) and works on that sequence, using
the codec where code-point arithmetic is needed.

Dependency rule: may import `utf8kit.engine`; do not import from
`utf8kit.entrypoints`.
"""
