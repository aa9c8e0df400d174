import typer
import requests
from dbpedia_loader.core.logging import bind_run_context, setup_logging, get_logger

# Initialize logging before anything else
setup_logging()
logger = get_logger(__name__)

app = typer.Typer()


@app.command()
def load(
    abstract_url: str = typer.Option(None, help="URL of the short_abstracts dump"),
    abstract_path: str = typer.Option(None, help="Local path of the short_abstracts dump"),
    instance_url: str = typer.Option(None, help="URL of the OpenSearchServer instance"),
    index_name: str = typer.Option(None, help="Name of the index to fill"),
    login: str = typer.Option(None, help="The optional login"),
    key: str = typer.Option(None, help="The optional API key"),
    buffer_size: int = typer.Option(None, min=1, help="Documents sent per update call"),
    language: str = typer.Option(None, help="Language code of the dump (en, fr, de...)"),
    limit: int = typer.Option(None, min=1, help="Stop after this many lines"),
    progress: bool = typer.Option(True, help="Show progress bars"),
):
    """Download the dump if missing, then load its abstracts into the index."""
    from dbpedia_loader.config import settings
    from dbpedia_loader.core.indexing import ShortAbstractLoader
    from dbpedia_loader.errors import LoaderError
    from dbpedia_loader.preprocessing import Bz2LineSource
    from dbpedia_loader.schema import LanguageEnum
    from dbpedia_loader.utils.download import ensure_dump_file
    from dbpedia_loader.utils.oss_client import OpenSearchServerClient, UpdateApi

    instance_url = instance_url or settings.instance_url
    index_name = index_name or settings.index_name
    if not instance_url or not index_name:
        logger.error("missing_target", instance_url=instance_url, index_name=index_name)
        typer.echo("Both --instance-url and --index-name (or LOADER_INSTANCE_URL / LOADER_INDEX_NAME) are required.", err=True)
        raise typer.Exit(code=2)

    try:
        lang = LanguageEnum.find_by_code(language or settings.language)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--language")

    bind_run_context(index=index_name, language=lang.code)
    logger.info("load_cli_started", instance_url=instance_url)

    try:
        dump_path = ensure_dump_file(
            abstract_url or settings.abstract_url,
            abstract_path or settings.abstract_path,
            progress=progress,
        )
        with OpenSearchServerClient(
            instance_url,
            login=login or settings.login,
            key=key or settings.key,
            timeout=settings.request_timeout,
        ) as client:
            loader = ShortAbstractLoader(
                source=Bz2LineSource(dump_path),
                sink=UpdateApi(client),
                index_name=index_name,
                buffer_size=buffer_size or settings.buffer_size,
                language=lang,
            )
            result = loader.run(limit=limit, progress=progress)
    except (LoaderError, OSError, UnicodeError, requests.RequestException) as e:
        logger.error("load_failed", error=str(e), error_type=type(e).__name__)
        raise typer.Exit(code=1)

    print(f"\nLoad Complete!")
    print(f"Lines Processed: {result.lines_processed}")
    print(f"Documents Indexed: {result.documents_indexed}")
    print(f"Batches Sent: {result.batches_flushed}")


@app.command()
def version():
    """Show version."""
    from dbpedia_loader import __version__
    print(f"dbpedia-loader v{__version__}")


if __name__ == "__main__":
    app()
