from user_api.server import run

run()
