# servicios_escolares/commands.py

from flask.cli import with_appcontext
import click

from servicios_escolares import get_store
from servicios_escolares.exceptions import StorageError
from servicios_escolares.models import RECORD_TYPES, UNTYPED_COLLECTIONS


@click.command("init-store")
@click.option("--reset", is_flag=True, help="Descarta los datos existentes y crea un documento vacío.")
@with_appcontext
def init_store_command(reset):
    """Inicializa el documento de servicios escolares con todas sus colecciones."""
    print("Iniciando el almacén de servicios escolares...")
    store = get_store()

    try:
        if reset:
            print("Descartando los datos existentes...")
            document = store.reset()
        else:
            document = store.document

        # --- Colecciones del esquema ---
        for name in [record_type.COLLECTION for record_type in RECORD_TYPES] + list(UNTYPED_COLLECTIONS):
            records = document.collection(name)
            print(f"  {name}: {len(records)} registros")

        # Persiste las colecciones que faltaban en el documento
        store.save()
        print(f"Escuela: {document.config['schoolName']} ({document.config['academicYear']})")

        print("\nAlmacén inicializado con éxito.")

    except StorageError as e:
        print(f"\nERROR: No se pudo guardar el almacén: {e}")
