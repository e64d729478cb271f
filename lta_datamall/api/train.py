"""
Train endpoints.
"""

from .client import BaseLTAClient
from .query import lookup
from ..models.train import RawTrainServiceAlertResp

TRAIN_SERVICE_ALERTS_PATH = "/TrainServiceAlerts"


def get_train_service_alert(client: BaseLTAClient):
    """
    Get the train network status, including affected segments, free bus
    and shuttle arrangements, and published messages.

    Update freq: ad hoc.

    Returns:
        TrainServiceAlert
    """
    return lookup(
        client,
        client.api_url(TRAIN_SERVICE_ALERTS_PATH),
        RawTrainServiceAlertResp,
        lambda rb: rb,
    )
