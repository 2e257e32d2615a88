"""Partition a Deployment's ReplicationControllers into new and old generations.

The "new" controller is the one whose pod template is structurally equal to
the Deployment's template stamped with its own fingerprint.  Equality is
checked on the whole template, not only on the fingerprint label, so a hash
collision is never trusted on its own.  Every other candidate is "old".
"""

from __future__ import annotations

from kubegen.cluster.lister import Lister
from kubegen.errors import KubeGenError, ListingError
from kubegen.models.results import Classification
from kubegen.models.workloads import Deployment, Pod, PodTemplate, ReplicationController
from kubegen.observability.logging import get_logger
from kubegen.template.compare import templates_equal
from kubegen.template.fingerprint import stamp_fingerprint
from kubegen.template.labels import selector_matches

_log = get_logger("classifier")


def new_template(deployment: Deployment) -> PodTemplate:
    """Return the template the Deployment's new controller must carry."""
    return stamp_fingerprint(deployment.template, deployment.unique_label_key)


def is_new(controller: ReplicationController, desired: PodTemplate) -> bool:
    """True when *controller* carries exactly the *desired* (stamped) template."""
    return templates_equal(controller.template, desired)


def _in_scope(deployment: Deployment, namespace: str, labels: dict[str, str]) -> bool:
    return namespace == deployment.namespace and selector_matches(deployment.selector, labels)


async def _list_pods(deployment: Deployment, lister: Lister) -> list[Pod]:
    try:
        pods = await lister.list_pods(deployment.namespace, deployment.selector)
    except KubeGenError:
        raise
    except Exception as exc:
        raise ListingError("pods", deployment.namespace, exc) from exc
    return [pod for pod in pods if _in_scope(deployment, pod.namespace, pod.labels)]


async def _list_controllers(deployment: Deployment, lister: Lister) -> list[ReplicationController]:
    # Listers may return the whole namespace (or more); keep only the
    # controllers labelled into this Deployment's selector.
    try:
        controllers = await lister.list_controllers(deployment.namespace, deployment.selector)
    except KubeGenError:
        raise
    except Exception as exc:
        raise ListingError("replicationcontrollers", deployment.namespace, exc) from exc
    return [rc for rc in controllers if _in_scope(deployment, rc.namespace, rc.labels)]


async def find_new(deployment: Deployment, lister: Lister) -> ReplicationController | None:
    """Return the controller matching the Deployment's intent.

    Returns None when the new controller has not been created yet.

    Raises:
        ListingError: the controller listing failed.
    """
    controllers = await _list_controllers(deployment, lister)
    desired = new_template(deployment)
    for rc in controllers:
        if is_new(rc, desired):
            _log.debug("new_controller_found", deployment=deployment.name, controller=rc.name)
            return rc
    _log.debug("new_controller_absent", deployment=deployment.name, candidates=len(controllers))
    return None


async def classify(deployment: Deployment, lister: Lister) -> Classification:
    """Return the old controllers of *deployment*.

    ``old_all`` holds every old candidate; ``old_with_pods`` only those whose
    selector matches at least one pod selected by the Deployment.  All or
    nothing: a listing failure raises and no partial result is returned.

    Raises:
        ListingError: the pod or controller listing failed.
    """
    pods = await _list_pods(deployment, lister)
    controllers = await _list_controllers(deployment, lister)
    desired = new_template(deployment)

    old_all: dict[str, ReplicationController] = {}
    old_with_pods: dict[str, ReplicationController] = {}
    for rc in controllers:
        if is_new(rc, desired):
            continue
        old_all.setdefault(rc.name, rc)
        if rc.name not in old_with_pods and any(selector_matches(rc.selector, pod.labels) for pod in pods):
            old_with_pods[rc.name] = old_all[rc.name]

    _log.debug(
        "controllers_classified",
        deployment=deployment.name,
        namespace=deployment.namespace,
        pods=len(pods),
        candidates=len(controllers),
        old=len(old_all),
        old_with_pods=len(old_with_pods),
    )
    return Classification(
        old_with_pods=tuple(old_with_pods[name] for name in sorted(old_with_pods)),
        old_all=tuple(old_all[name] for name in sorted(old_all)),
    )
