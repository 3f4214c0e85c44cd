# transport_factory.py

from typing import Optional

from quadlight.hardware.transport_interface import ITransport
from quadlight.hardware.virtual_transport import VirtualTransport
from quadlight.managers.config_manager import DeviceConfig
from quadlight.models.enums import LogCategory
from quadlight.utils.logger import get_logger
from quadlight.utils.runtime_info import RuntimeInfo

log = get_logger().for_category(LogCategory.HARDWARE)


def create_transport(config: Optional[DeviceConfig] = None) -> ITransport:
    """
    Factory that NEVER crashes the app on machines without hidapi.
    """
    config = config or DeviceConfig()

    if not config.virtual and RuntimeInfo.has_hidapi():
        try:
            from quadlight.hardware.hid_transport import Qc2sHidTransport, Qc2sConfig

            return Qc2sHidTransport(Qc2sConfig(
                vendor_id=config.vendor_id,
                product_id=config.product_id,
                interface=config.interface,
                inter_group_ms=config.inter_group_ms,
                ack_timeout_ms=config.ack_timeout_ms,
            ))
        except ImportError as ex:
            log.warn("hidapi unavailable, using virtual transport", error=str(ex))

    log.info("Using virtual transport")
    return VirtualTransport()
