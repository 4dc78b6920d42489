from azure_cdn_tools import cdn, config
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(cdn.app, name="cdn")
app.add_typer(config.app, name="config")
