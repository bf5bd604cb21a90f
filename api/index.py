from mangum import Mangum
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ledger.api import app
from ledger.logging_setup import configure_logging

configure_logging()

app.root_path = "/api"

handler = Mangum(app)
