"""Entry point: python -m zet <command>"""

from zet.cli import cli

if __name__ == "__main__":
    cli(prog_name="zet")
