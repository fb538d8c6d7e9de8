"""Pure domain logic — workspace rules, layouts, and session naming.

Nothing in this package touches the filesystem or spawns processes.
"""
