"""Command line entrypoint for the recipebox application.

Recipes are never written anywhere, so the app has no server to start. Use
``flask --app main recipes --help`` (or the ``recipebox`` script installed by
the package) to reach the commands registered on the ``app`` object below.
"""

from recipebox import create_app

app = create_app()


__all__ = ["app"]
