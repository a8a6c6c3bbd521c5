from .communications_service import CommunicationsService
from .csv_exporter import CsvColumn, CsvExport, export_csv
from .dashboard_service import DashboardService
from .form_controller import FormController
from .list_filter import distinct_values, filter_records
from .list_view_model import ListViewModel
from .resource_pages import PAGES, ResourcePage, get_page
from .session_context import SessionContext
from .whitelabel_service import WhiteLabelService

__all__ = [
    "CommunicationsService",
    "CsvColumn",
    "CsvExport",
    "export_csv",
    "DashboardService",
    "FormController",
    "distinct_values",
    "filter_records",
    "ListViewModel",
    "PAGES",
    "ResourcePage",
    "get_page",
    "SessionContext",
    "WhiteLabelService",
]
