from imghash.main import run

run()
