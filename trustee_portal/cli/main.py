"""Main CLI application using Cyclopts."""

import cyclopts

from trustee_portal.cli.commands import roles, serve

app = cyclopts.App(
    name="trustee-portal",
    help="Trustee Portal - roles, permissions and the governance API",
)

app.command(roles.roles, name="roles")
app.command(roles.permissions, name="permissions")
app.command(roles.check, name="check")
app.command(roles.transition, name="transition")
app.command(serve.serve, name="serve")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
