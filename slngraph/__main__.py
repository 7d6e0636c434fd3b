from slngraph.main import cli

cli()
