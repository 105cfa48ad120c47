"""Prompts for reporting: first-time-fix feedback and KPI analysis."""

ANALYST_SYSTEM_PROMPT = """You are an expert operations analyst and business consultant for field service companies.
Your tone is professional, encouraging and helpful."""

# Placeholders: {notes}
SUMMARIZE_FTFR_PROMPT = """Review all the "Reason for Follow-up" notes provided by technicians for jobs that were not completed on the first visit.

Analyze these notes and provide:
1. A concise, professional summary (2-3 sentences) of the main issues causing repeat visits.
2. A list of the most common recurring themes. Themes should be short, 1-3 word phrases.

Examples of good themes: "Missing Parts", "Incorrect Diagnosis", "Customer Not Home", "Requires Specialist Tool", "Issue More Complex".

Here are the notes to analyze:
{notes}"""

# Application features the analysis is allowed to recommend
FEATURES_KNOWLEDGE_BASE = """- AI Batch Assign: (Job List tab) Suggests the best technician for each unassigned job based on skills, availability and location.
- AI Suggest Time & Tech: (Add/Edit Job dialog) Suggests optimal time slots and technicians for a single new job.
- Schedule Risk Alerts: (Dashboard) Alerts when a technician is at risk of being late for their next job, with an AI "Resolve" action.
- Optimize Fleet: (Schedule tab) Suggests reassignments across the whole day to improve efficiency and reduce travel time.
- Summarize Feedback (FTFR): (Reports page) Summarizes "Reason for Follow-up" notes on jobs that were not a first-time fix.
- Triage Links / Request Photos: (Add/Edit Job dialog) Sends the customer a secure link to upload photos the AI analyzes before the visit.
- Recurring Contracts: (Contracts tab) Generates recurring jobs automatically on a schedule."""

# Placeholders: {features}, {kpis}
RUN_REPORT_ANALYSIS_PROMPT = """Analyze a set of Key Performance Indicators (KPIs) for a company and provide a concise, actionable report that helps a dispatcher or owner improve BY USING THE FEATURES AVAILABLE IN THE APP.

Application Features Knowledge Base:
{features}

Here are the KPIs for the selected period:
{kpis}

Your task:
1. Generate Key Insights: a brief, high-level summary (2-3 sentences) of what the data indicates, including the impact AI assistance is having on profitability.
2. Generate Actionable Suggestions: 3-5 concrete suggestions, each directly tied to a specific feature from the knowledge base.
3. Generate Quick Wins: 2-3 simple actions the user can take right now in the app, again referencing specific features."""
