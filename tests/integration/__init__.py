"""
Dungeon Team Finder flows run against the in-memory driver.

These tests exercise the sample tasks, questions, page objects and step
library together and demonstrate:
- Asserting on the exact sequence of browser commands
- Fail-fast behaviour with missing abilities and elements
- Screenplay tasks and page objects driving the same form
"""
