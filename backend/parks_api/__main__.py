from parks_api.main import run

run()
