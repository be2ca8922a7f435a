"""vehicletax: vehicle registration tax calculator."""

__version__ = "0.1.0"

from vehicletax.catalog.catalog import VehicleCatalog as VehicleCatalog
from vehicletax.catalog.vehicle import Vehicle as Vehicle
from vehicletax.config.defaults import default_config as default_config
from vehicletax.config.defaults import default_discounts as default_discounts
from vehicletax.config.schema import CalculatorConfig as CalculatorConfig
from vehicletax.config.schema import DiscountSchedule as DiscountSchedule
from vehicletax.core.calculator import PaymentBreakdown as PaymentBreakdown
from vehicletax.core.calculator import TaxCalculator as TaxCalculator
from vehicletax.io.loaders import load_brackets as load_brackets
from vehicletax.io.loaders import load_vehicles as load_vehicles
from vehicletax.taxes.brackets import TaxBracket as TaxBracket
from vehicletax.utils.exceptions import LoadError as LoadError
from vehicletax.utils.exceptions import NavigationError as NavigationError
from vehicletax.utils.exceptions import PreconditionError as PreconditionError
from vehicletax.utils.exceptions import VehicleTaxError as VehicleTaxError
