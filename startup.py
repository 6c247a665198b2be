"""
Scoped acquisition of the subsystems the clock needs.

Each subsystem is created and checked immediately. Anything acquired is
registered on an ExitStack, so a failure halfway through still releases
what came before it.
"""

INITIALIZED = ("core", "keyboard", "primitives")


class StartupError(Exception):
    def __init__(self, subsystem):
        self.subsystem = subsystem
        verb = "initialize" if subsystem in INITIALIZED else "create"
        super().__init__(f"Failed to {verb} {subsystem}")


def acquire(stack, subsystem, create, release=None):
    """
    Create a subsystem resource and register its release on `stack`.

    Raises StartupError if `create` raises or returns None/False.
    """
    try:
        resource = create()
    except Exception as e:
        raise StartupError(subsystem) from e

    if resource is None or resource is False:
        raise StartupError(subsystem)

    if release is not None:
        stack.callback(release, resource)
    return resource
