from libcatalog.main import app

app(prog_name="library-catalog")
