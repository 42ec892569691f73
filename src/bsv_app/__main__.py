from bsv_app.cli import app

app(prog_name="bsv-app")
