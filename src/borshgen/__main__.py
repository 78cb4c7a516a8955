from borshgen.cli import cli

cli()
