"""
Test suite for actorflow and the Dungeon Team Finder glue.

This package contains:
- unit/: actor, task, interaction and question behaviour against fakes
- integration/: Dungeon Team Finder tasks, pages and steps end to end on fakes
- bdd/: Gherkin scenarios from features/ driven by pytest-bdd
- e2e/: Playwright runs against a live app (skipped unless configured)
"""
