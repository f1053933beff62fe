"""
Test glue for the Dungeon Team Finder web app.

Screenplay-style targets, tasks and questions live next to classic page
objects and a step library so the two styles can be compared on the same
login flow.
"""
