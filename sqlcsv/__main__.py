from sqlcsv.main import run

run()
