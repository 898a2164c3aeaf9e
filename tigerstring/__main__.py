from tigerstring.accumulator import run

run()
