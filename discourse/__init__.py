# discourse/__init__.py
"""
Discourse layer: how a Being is referred to in a message template.

- `referring_expression`: name selection ("I", "you", "Brunhilda", "the goblin").
- `phrasing`: token substitution for one Being and one marker.
"""
