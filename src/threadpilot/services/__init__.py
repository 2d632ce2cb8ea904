# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Business logic service layer."""

from threadpilot.core.result_types import Err, Ok, Result

from .insurance_service import PersonInsurancesService
from .vehicle_client import HttpVehicleLookup, LocalVehicleLookup, VehicleLookup
from .vehicle_service import VehicleService

__all__ = [
    "Result",
    "Ok",
    "Err",
    "PersonInsurancesService",
    "VehicleService",
    "VehicleLookup",
    "HttpVehicleLookup",
    "LocalVehicleLookup",
]
