# In-memory domain records; nothing here is persisted

from .ingestion.uploaded_source import UploadedSource, SourceOrigin
from .scenarios.scenario import Scenario, PendingEdit, Priority, PRIORITIES
