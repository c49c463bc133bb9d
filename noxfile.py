import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


def _install(session: nox.Session) -> None:
    session.run("poetry", "install", "--all-extras", external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full storefront suite."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
@nox.parametrize("layer", ["domain", "application", "integration", "bdd"])
def layer(session: nox.Session, layer: str) -> None:
    """Run one test layer, selected by the directory markers set in conftest."""
    _install(session)
    session.run("pytest", "-m", layer, *session.posargs)
