from taskplan.main import run

run()
