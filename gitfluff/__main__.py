from gitfluff.cli.main import run

run()
