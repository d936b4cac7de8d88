from climate_stats.main import run

run()
