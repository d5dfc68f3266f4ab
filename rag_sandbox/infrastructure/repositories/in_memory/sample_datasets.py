"""
Sample corpus for the sandbox.

Two small datasets (support playbook, security blueprints) with the documents
and sample questions the UI offers out of the box.
"""

from typing import Final, Tuple

from ....domain.entities import Dataset, SourceDocument

SUPPORT_PLAYBOOK: Final[Dataset] = Dataset(
    id="support-playbook",
    name="Customer Support Playbook",
    description=(
        "A curated set of onboarding guides, escalation runbooks, and release "
        "notes for a fast-growing SaaS product."
    ),
    color="#3b82f6",
    sample_queries=(
        "How should we troubleshoot SSO provisioning failures?",
        "What does the premium support escalation policy guarantee?",
    ),
    documents=(
        SourceDocument(
            id="doc-support-1",
            title="SSO Provisioning Checklist",
            last_updated="2025-03-18",
            tags=("sso", "identity", "enterprise"),
            content=(
                "Successful SSO provisioning requires a verified SAML metadata "
                "file, an activated enterprise workspace, and aligned attribute "
                "mappings. When a provisioning job fails, validate the audience "
                "URI, confirm the ACS URL matches the latest release, and rotate "
                "secrets older than 90 days. Escalate to the platform team if "
                "retry attempts exceed three and the customer has premium "
                "support. Provide a link to the audit log when escalating so the "
                "on-call engineer can reconstruct the failure quickly."
            ),
        ),
        SourceDocument(
            id="doc-support-2",
            title="Premium Support Entitlements",
            last_updated="2025-04-02",
            tags=("support", "sla"),
            content=(
                "Premium support includes 24/7 incident intake, a 15-minute "
                "first-response SLA for SEV0 and SEV1 tickets, and direct access "
                "to the enterprise solutions engineer assigned to the account. "
                "Escalations must include customer impact, reproduction steps, "
                "and any mitigation already attempted. Planned maintenance "
                "notifications must be sent 72 hours in advance. The support "
                "team is responsible for weekly summaries of open escalations "
                "for executive stakeholders."
            ),
        ),
        SourceDocument(
            id="doc-support-3",
            title="Release Notes - Admin Console 2.7",
            last_updated="2025-05-11",
            tags=("release-notes", "admin-console"),
            content=(
                "Version 2.7 introduces guided provisioning flows for SAML "
                "integrations, adds webhooks for user lifecycle events, and "
                "deprecates legacy SCIM v1 endpoints. Customers must migrate "
                "integrations before July 31. The release also improves audit "
                "log filtering, allowing support engineers to trace provisioning "
                "attempts by request ID. Known issues: webhook retries pause "
                "after five failures and require manual resume."
            ),
        ),
    ),
)

SECURITY_BLUEPRINTS: Final[Dataset] = Dataset(
    id="security-blueprints",
    name="Security & Compliance Blueprints",
    description=(
        "Policies, architecture briefs, and audit responses used by a "
        "compliance automation team."
    ),
    color="#10b981",
    sample_queries=(
        "How do we justify regional data residency to auditors?",
        "What is our process for rotating API credentials?",
    ),
    documents=(
        SourceDocument(
            id="doc-sec-1",
            title="Regional Data Residency Strategy",
            last_updated="2025-01-07",
            tags=("compliance", "architecture"),
            content=(
                "We deploy per-region storage clusters so customer data remains "
                "in the geography where it was collected. The control plane "
                "orchestrates tenant metadata while encryption keys are isolated "
                "per region using a dedicated KMS. Audit responses must include "
                "diagrams showing data flow, retention policies, and "
                "cross-region replication restricted to hashed telemetry. "
                "Exceptions require VP-level approval and a 30-day remediation "
                "plan."
            ),
        ),
        SourceDocument(
            id="doc-sec-2",
            title="Credential Rotation Playbook",
            last_updated="2025-02-19",
            tags=("security", "operations"),
            content=(
                "API credentials are rotated every 60 days using automated "
                "pipelines backed by short-lived tokens. Secrets older than 45 "
                "days trigger proactive notifications in Slack. Emergency "
                "rotations follow the incident command system, with audit "
                "logging of each credential issuance. Customers receive a status "
                "page update if a rotation affects their integrations."
            ),
        ),
        SourceDocument(
            id="doc-sec-3",
            title="SOC 2 Type II Common Responses",
            last_updated="2025-03-30",
            tags=("audit", "soc2"),
            content=(
                "Auditors frequently request evidence of change management, "
                "access reviews, and incident response drills. We store "
                "quarterly access review exports in the compliance drive, "
                "reference PagerDuty postmortems for drill evidence, and link to "
                "the Terraform change approval flow. When answering auditor "
                "questions, cite the control ID, provide the evidence path, and "
                "note the review cadence."
            ),
        ),
    ),
)

SAMPLE_DATASETS: Final[Tuple[Dataset, ...]] = (SUPPORT_PLAYBOOK, SECURITY_BLUEPRINTS)
