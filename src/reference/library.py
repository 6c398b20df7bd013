"""Static reference data: regulations, categories, evidence and question patterns.

The library is built once at import time and exposed through read-only
mappings. Keys of REGULATORY_REFERENCES are normalized identifiers
(uppercase, single spaces) so lookups can go straight through
``utils.text.normalize_reference``.
"""

from types import MappingProxyType
from typing import Mapping

from .models import (
    RegulatoryReference,
    SubPart,
    ComplianceCategory,
    EvidencePattern,
    QuestionPattern,
)


def _sub_parts(parts: dict) -> dict:
    """Coerce plain-string sub-part descriptions into SubPart records."""
    return {
        key: SubPart(description=value) if isinstance(value, str) else SubPart(**value)
        for key, value in parts.items()
    }


def _index(records) -> Mapping:
    return MappingProxyType({record.id: record for record in records})


# Canadian Aviation Regulations Part IX, advisory circulars and staff instructions
REGULATORY_REFERENCES: Mapping[str, RegulatoryReference] = _index([
    RegulatoryReference(
        id="CAR 900",
        title="RPAS General",
        description="General provisions for remotely piloted aircraft systems",
        category="general",
        topics=["definitions", "applicability", "general requirements"],
    ),
    RegulatoryReference(
        id="CAR 901",
        title="RPAS Registration and Marking",
        description="Requirements for registering and marking RPAS",
        category="equipment",
        topics=["registration", "marking", "identification"],
    ),
    RegulatoryReference(
        id="CAR 901.01",
        title="Registration Requirements",
        description="RPAS must be registered before operation",
        category="equipment",
        topics=["registration"],
        evidence_types=["registration certificate", "TC registration number"],
    ),
    RegulatoryReference(
        id="CAR 901.02",
        title="Marking Requirements",
        description="RPAS must display registration markings",
        category="equipment",
        topics=["marking", "identification"],
        evidence_types=["photos of markings", "marking procedure"],
    ),
    RegulatoryReference(
        id="CAR 901.29",
        title="Advanced Operations - General",
        description="Requirements for advanced RPAS operations",
        category="operations",
        topics=["advanced operations", "controlled airspace", "proximity to people"],
    ),
    RegulatoryReference(
        id="CAR 901.48",
        title="Maintenance Requirements",
        description="RPAS maintenance and airworthiness requirements",
        category="equipment",
        topics=["maintenance", "airworthiness", "inspection"],
        evidence_types=["maintenance program", "inspection checklists", "maintenance logs"],
    ),
    RegulatoryReference(
        id="CAR 901.54",
        title="Pilot Certificate - Advanced",
        description="Advanced RPAS pilot certificate requirements",
        category="crew",
        topics=["pilot certification", "qualifications", "training"],
        evidence_types=["pilot certificate", "training records", "recency"],
    ),
    RegulatoryReference(
        id="CAR 901.55",
        title="Pilot Certificate - Basic",
        description="Basic RPAS pilot certificate requirements",
        category="crew",
        topics=["pilot certification", "basic operations"],
    ),
    RegulatoryReference(
        id="CAR 901.70",
        title="Flight Crew Training",
        description="Training requirements for RPAS flight crew",
        category="crew",
        topics=["training", "competency", "currency"],
        evidence_types=["training records", "competency assessments", "recency logs"],
    ),
    RegulatoryReference(
        id="CAR 903",
        title="Special Flight Operations Certificate",
        description="SFOC requirements for complex RPAS operations",
        category="operations",
        topics=["SFOC", "special operations", "risk mitigation"],
    ),
    RegulatoryReference(
        id="CAR 903.01",
        title="SFOC Application Requirements",
        description="What must be included in an SFOC application",
        category="operations",
        topics=["application", "documentation requirements"],
        sub_parts=_sub_parts({
            "a": "BVLOS operations",
            "b": "Operations over 25kg MTOW",
            "c": "Swarm operations",
            "d": "Night operations",
            "e": "Transport of dangerous goods",
            "f": "Operations over people",
            "g": "Autonomous operations",
            "h": "First responder operations",
        }),
    ),
    RegulatoryReference(
        id="CAR 903.02",
        title="SFOC Content Requirements",
        description="Detailed content requirements for SFOC applications",
        category="operations",
        topics=["CONOPS", "procedures", "risk assessment"],
        sub_parts=_sub_parts({
            "d": {"topic": "CONOPS", "description": "Concept of operations - purpose, scope, method"},
            "e": {"topic": "Area", "description": "Operational area description and boundaries"},
            "f": {"topic": "Equipment", "description": "RPAS specifications and capabilities"},
            "g": {"topic": "C2 Link", "description": "Command and control link specifications"},
            "h": {"topic": "Navigation", "description": "Navigation and geo-fencing capabilities"},
            "i": {"topic": "Flight Planning", "description": "Flight planning procedures"},
            "j": {"topic": "Emergency", "description": "Emergency and contingency procedures"},
            "k": {"topic": "Weather", "description": "Weather minimums and monitoring"},
            "l": {"topic": "Crew", "description": "Crew qualifications and responsibilities"},
            "m": {"topic": "Communications", "description": "Communication procedures"},
            "n": {"topic": "Security", "description": "Security procedures"},
            "o": {"topic": "Third Party", "description": "Third party and property considerations"},
        }),
    ),
    RegulatoryReference(
        id="AC 903-001",
        title="RPAS SORA Application",
        description="Guidance on applying SORA methodology for SFOC applications",
        category="safety",
        topics=["SORA", "risk assessment", "SAIL", "OSO", "GRC", "ARC"],
        evidence_types=["SORA report", "risk assessment", "OSO compliance matrix"],
    ),
    RegulatoryReference(
        id="AC 901-001",
        title="RPAS Operations Guidance",
        description="General guidance for RPAS operations in Canada",
        category="operations",
        topics=["operations", "guidance", "best practices"],
    ),
    RegulatoryReference(
        id="SI 623-001",
        title="RPAS Review Procedures",
        description="Transport Canada procedures for reviewing RPAS applications",
        category="operations",
        topics=["review criteria", "assessment"],
    ),
])


# Category order matters: ties in keyword score resolve to the earlier entry
COMPLIANCE_CATEGORIES: Mapping[str, ComplianceCategory] = _index([
    ComplianceCategory(
        id="operations",
        name="Operations",
        description="Concept of operations, flight procedures, operational parameters",
        keywords=[
            "conops", "concept of operations", "operations", "procedure", "flight plan",
            "mission", "purpose", "scope", "method", "operational area", "boundaries",
            "altitude", "duration", "frequency", "vlos", "bvlos", "evlos",
        ],
        typical_requirements=[
            "Description of operations purpose",
            "Operational area and boundaries",
            "Flight parameters (altitude, duration, frequency)",
            "Operational procedures",
            "Pre-flight and post-flight procedures",
        ],
        evidence_types=["operations manual", "CONOPS document", "flight plans", "SOPs"],
    ),
    ComplianceCategory(
        id="equipment",
        name="Equipment",
        description="Aircraft specifications, systems, maintenance, airworthiness",
        keywords=[
            "aircraft", "rpas", "uas", "drone", "equipment", "specifications", "specs",
            "manufacturer", "model", "serial", "registration", "c2 link", "command",
            "control", "navigation", "gps", "geo-fence", "geofencing", "payload",
            "sensor", "camera", "battery", "propulsion", "maintenance", "inspection",
            "airworthiness", "mtow", "weight",
        ],
        typical_requirements=[
            "Aircraft type and specifications",
            "Registration and markings",
            "C2 link specifications and redundancy",
            "Navigation and positioning systems",
            "Geo-fencing capabilities",
            "Payload and sensor specifications",
            "Maintenance program",
        ],
        evidence_types=[
            "manufacturer specs", "registration certificate", "maintenance logs",
            "inspection checklists", "equipment list", "C2 link specifications",
        ],
    ),
    ComplianceCategory(
        id="crew",
        name="Crew",
        description="Pilot qualifications, training, medical, crew roles",
        keywords=[
            "pilot", "crew", "operator", "rpic", "pic", "visual observer", "vo",
            "spotter", "certificate", "certification", "license", "qualification",
            "training", "training records", "competency", "medical", "recency",
            "currency", "experience", "hours", "flight time",
        ],
        typical_requirements=[
            "Pilot certification (Basic/Advanced)",
            "Training records and competency",
            "Medical requirements",
            "Currency and recency",
            "Flight experience",
            "Crew roles and responsibilities",
            "Visual observer qualifications",
        ],
        evidence_types=[
            "pilot certificate", "training records", "medical declaration",
            "flight logs", "competency assessments", "crew roster",
        ],
    ),
    ComplianceCategory(
        id="safety",
        name="Safety & Risk",
        description="Risk assessment, SORA, mitigations, safety management",
        keywords=[
            "safety", "risk", "hazard", "assessment", "sora", "sail", "oso",
            "grc", "arc", "ground risk", "air risk", "mitigation", "sms",
            "safety management", "incident", "accident", "reporting",
        ],
        typical_requirements=[
            "Risk assessment methodology",
            "SORA analysis (if applicable)",
            "Ground risk class and mitigations",
            "Air risk class and mitigations",
            "Hazard identification",
            "Safety management system",
            "Incident reporting procedures",
        ],
        evidence_types=[
            "SORA report", "risk assessment", "hazard register",
            "safety management manual", "incident reports",
        ],
    ),
    ComplianceCategory(
        id="emergency",
        name="Emergency Procedures",
        description="Contingency plans, emergency response, abnormal operations",
        keywords=[
            "emergency", "contingency", "abnormal", "lost link", "fly-away", "flyaway",
            "rth", "return to home", "failure", "malfunction", "abort", "terminate",
            "crash", "incident", "first aid", "medical emergency", "fire",
        ],
        typical_requirements=[
            "Lost link procedures",
            "Fly-away procedures",
            "Low battery emergency procedures",
            "Weather deterioration procedures",
            "Medical emergency procedures",
            "Emergency contacts",
            "Abort/terminate procedures",
        ],
        evidence_types=[
            "emergency procedures document", "contingency plans",
            "emergency contact list", "emergency checklists",
        ],
    ),
    ComplianceCategory(
        id="communications",
        name="Communications",
        description="Crew communications, ATC coordination, radio procedures",
        keywords=[
            "communication", "radio", "frequency", "atc", "air traffic", "nav canada",
            "notam", "coordination", "phraseology", "check-in", "transponder",
        ],
        typical_requirements=[
            "Crew communication methods",
            "ATC coordination procedures",
            "Radio frequencies and monitoring",
            "NOTAM procedures",
            "Communication equipment",
            "Standard phraseology",
        ],
        evidence_types=[
            "communication procedures", "radio licenses",
            "ATC coordination letters", "NOTAM examples",
        ],
    ),
    ComplianceCategory(
        id="airspace",
        name="Airspace",
        description="Airspace classification, authorizations, deconfliction",
        keywords=[
            "airspace", "controlled", "uncontrolled", "class", "cyz", "restricted",
            "prohibited", "advisory", "authorization", "clearance", "notam",
            "nav canada", "deconfliction", "see and avoid", "detect and avoid", "daa",
        ],
        typical_requirements=[
            "Airspace classification at operational area",
            "Airspace authorization (if required)",
            "Deconfliction procedures",
            "NOTAM requirements",
            "See-and-avoid or DAA procedures",
        ],
        evidence_types=[
            "airspace authorization", "airspace charts",
            "NAV CANADA coordination", "NOTAM procedures",
        ],
    ),
    ComplianceCategory(
        id="weather",
        name="Weather",
        description="Weather minimums, monitoring, limitations",
        keywords=[
            "weather", "visibility", "ceiling", "cloud", "wind", "gust", "rain",
            "snow", "precipitation", "temperature", "icing", "metar", "taf",
            "forecast", "minimums", "limitations",
        ],
        typical_requirements=[
            "Weather minimums (visibility, ceiling, wind)",
            "Weather information sources",
            "Pre-flight weather assessment",
            "Continuous weather monitoring",
            "Weather abort criteria",
        ],
        evidence_types=[
            "weather minimums document", "weather briefing procedures",
            "weather sources list",
        ],
    ),
    ComplianceCategory(
        id="insurance",
        name="Insurance",
        description="Liability insurance, coverage requirements",
        keywords=[
            "insurance", "liability", "coverage", "policy", "certificate of insurance",
            "insured", "indemnity", "premium", "claim",
        ],
        typical_requirements=[
            "Liability insurance coverage amount",
            "Policy details and endorsements",
            "Certificate of insurance",
        ],
        evidence_types=["insurance certificate", "policy document", "endorsements"],
    ),
    ComplianceCategory(
        id="security",
        name="Security",
        description="Physical security, data security, access control",
        keywords=[
            "security", "access", "control", "data", "privacy", "encryption",
            "storage", "transport", "sensitive", "restricted",
        ],
        typical_requirements=[
            "Physical security of equipment",
            "Data handling and privacy",
            "Access control procedures",
            "Sensitive area procedures",
        ],
        evidence_types=["security procedures", "data handling policy", "access logs"],
    ),
    ComplianceCategory(
        id="documentation",
        name="Documentation",
        description="Records, logs, manuals, reporting",
        keywords=[
            "document", "record", "recordkeeping", "log", "manual", "report",
            "filing", "retention", "audit", "review", "version", "document control",
            "control", "archive",
        ],
        typical_requirements=[
            "Operations manual",
            "Flight logs",
            "Maintenance records",
            "Training records",
            "Incident reports",
            "Record retention periods",
        ],
        evidence_types=[
            "operations manual", "flight logs", "maintenance logs",
            "training records", "document control procedures",
        ],
    ),
])


EVIDENCE_PATTERNS: Mapping[str, EvidencePattern] = _index([
    EvidencePattern(
        id="conops",
        name="Concept of Operations",
        description="Document describing operational purpose, scope, and method",
        satisfies=["operations", "CAR 903.02(d)"],
        keywords=["conops", "concept", "operations", "purpose", "scope"],
        source_types=["operations manual", "project document", "CONOPS"],
    ),
    EvidencePattern(
        id="operationsManual",
        name="Operations Manual",
        description="Comprehensive manual covering all operational procedures",
        satisfies=["operations", "procedures", "emergency", "crew"],
        keywords=["operations manual", "ops manual", "procedures"],
        source_types=["policy"],
    ),
    EvidencePattern(
        id="manufacturerSpecs",
        name="Manufacturer Specifications",
        description="Official specifications from aircraft manufacturer",
        satisfies=["equipment", "CAR 903.02(f)"],
        keywords=["specifications", "specs", "manufacturer", "datasheet"],
        source_types=["equipment", "upload"],
    ),
    EvidencePattern(
        id="registrationCertificate",
        name="Registration Certificate",
        description="Transport Canada registration certificate for RPAS",
        satisfies=["equipment", "CAR 901.01"],
        keywords=["registration", "certificate", "transport canada"],
        source_types=["equipment", "upload"],
    ),
    EvidencePattern(
        id="maintenanceProgram",
        name="Maintenance Program",
        description="Documented maintenance schedule and procedures",
        satisfies=["equipment", "CAR 901.48"],
        keywords=["maintenance", "inspection", "schedule", "program"],
        source_types=["policy", "equipment"],
    ),
    EvidencePattern(
        id="pilotCertificate",
        name="Pilot Certificate",
        description="Transport Canada RPAS pilot certificate",
        satisfies=["crew", "CAR 901.54", "CAR 901.55"],
        keywords=["certificate", "pilot", "license", "qualification"],
        source_types=["crew", "upload"],
    ),
    EvidencePattern(
        id="trainingRecords",
        name="Training Records",
        description="Documentation of pilot training and competency",
        satisfies=["crew", "CAR 901.70"],
        keywords=["training", "competency", "records", "qualification"],
        source_types=["crew", "upload"],
    ),
    EvidencePattern(
        id="soraReport",
        name="SORA Report",
        description="Specific Operations Risk Assessment per JARUS methodology",
        satisfies=["safety", "AC 903-001", "risk"],
        keywords=["sora", "risk assessment", "sail", "oso", "grc", "arc"],
        source_types=["project", "upload"],
    ),
    EvidencePattern(
        id="riskAssessment",
        name="Risk Assessment",
        description="Hazard identification and risk mitigation documentation",
        satisfies=["safety", "risk"],
        keywords=["risk", "hazard", "assessment", "mitigation"],
        source_types=["project", "policy"],
    ),
    EvidencePattern(
        id="emergencyProcedures",
        name="Emergency Procedures",
        description="Documented contingency and emergency response procedures",
        satisfies=["emergency", "CAR 903.02(j)"],
        keywords=["emergency", "contingency", "procedures", "response"],
        source_types=["policy", "operations manual"],
    ),
    EvidencePattern(
        id="insuranceCertificate",
        name="Insurance Certificate",
        description="Certificate of insurance showing liability coverage",
        satisfies=["insurance"],
        keywords=["insurance", "certificate", "liability", "coverage"],
        source_types=["upload"],
    ),
])


# Cross-framework questions, checked in order; the first with a matching phrase wins
QUESTION_PATTERNS: Mapping[str, QuestionPattern] = _index([
    QuestionPattern(
        id="purpose_of_operations",
        patterns=[
            "purpose of the operation",
            "describe the operation",
            "what operations will be conducted",
            "nature of the work",
            "scope of operations",
        ],
        category="operations",
        regulatory_ref="CAR 903.02(d)",
        evidence_type="conops",
    ),
    QuestionPattern(
        id="operational_area",
        patterns=[
            "operational area",
            "area of operations",
            "geographic area",
            "location",
            "where will operations",
        ],
        category="operations",
        regulatory_ref="CAR 903.02(e)",
        evidence_type="operationsManual",
    ),
    QuestionPattern(
        id="flight_parameters",
        patterns=[
            "altitude",
            "flight parameters",
            "how high",
            "maximum height",
            "flight duration",
        ],
        category="operations",
        evidence_type="conops",
    ),
    QuestionPattern(
        id="aircraft_type",
        patterns=[
            "aircraft type",
            "what aircraft",
            "rpas used",
            "drone model",
            "equipment list",
        ],
        category="equipment",
        regulatory_ref="CAR 903.02(f)",
        evidence_type="manufacturerSpecs",
    ),
    QuestionPattern(
        id="c2_link",
        patterns=[
            "command and control",
            "c2 link",
            "control link",
            "communication link",
            "lost link",
        ],
        category="equipment",
        regulatory_ref="CAR 903.02(g)",
        evidence_type="manufacturerSpecs",
    ),
    QuestionPattern(
        id="pilot_qualifications",
        patterns=[
            "pilot qualifications",
            "pilot certificate",
            "who will operate",
            "crew qualifications",
            "certified pilot",
        ],
        category="crew",
        regulatory_ref="CAR 901.54",
        evidence_type="pilotCertificate",
    ),
    QuestionPattern(
        id="training",
        patterns=[
            "training",
            "competency",
            "how are pilots trained",
            "training program",
            "training records",
        ],
        category="crew",
        regulatory_ref="CAR 901.70",
        evidence_type="trainingRecords",
    ),
    QuestionPattern(
        id="risk_assessment",
        patterns=[
            "risk assessment",
            "risk analysis",
            "hazard",
            "sora",
            "how do you assess risk",
        ],
        category="safety",
        regulatory_ref="AC 903-001",
        evidence_type="soraReport",
    ),
    QuestionPattern(
        id="emergency_procedures",
        patterns=[
            "emergency",
            "contingency",
            "what if",
            "failure",
            "malfunction",
            "lost link procedure",
        ],
        category="emergency",
        regulatory_ref="CAR 903.02(j)",
        evidence_type="emergencyProcedures",
    ),
    QuestionPattern(
        id="insurance_coverage",
        patterns=[
            "insurance",
            "liability",
            "coverage",
            "insured",
            "policy",
        ],
        category="insurance",
        evidence_type="insuranceCertificate",
    ),
])
