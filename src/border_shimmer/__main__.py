from border_shimmer.main import run

run()
