"""azpub - Azure App Service publishing helper

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- Security by design (no credentials in code)
- Fail fast with helpful guidance

The azpub CLI provisions a resource group and web app, enables local git
deployment, and points the current repository at the new deployment endpoint.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
