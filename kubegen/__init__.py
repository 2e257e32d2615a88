"""kubegen -- generation resolution and readiness aggregation for Deployments.

Given a Deployment and the ReplicationControllers and Pods of its namespace,
kubegen tells a rollout controller which controller carries the desired pod
template ("new"), which ones are prior generations ("old"), what revision each
generation has, and how many pods across a set of controllers are ready.
"""

__version__ = "0.2.0"
