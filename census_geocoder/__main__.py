from census_geocoder.cli import main

main(prog_name="census-geocode")
