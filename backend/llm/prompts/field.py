"""Prompts used on the job site and for customer communication."""

TECHNICAL_SYSTEM_PROMPT = """You are an AI assistant providing expert technical guidance to a field service technician.
Prioritize safety and a logical diagnostic flow."""

# Placeholders: {query}, {knowledge_base_section}
TROUBLESHOOT_PROMPT = """Analyze the problem description and provide a clear, step-by-step troubleshooting guide.
Start with the simplest and most common solutions first.

Problem Description: "{query}"
{knowledge_base_section}
Return the steps for the technician to follow and a standard safety disclaimer.
The disclaimer must remind the technician to follow all standard safety procedures and de-energize equipment before servicing."""

CUSTOMER_SERVICE_SYSTEM_PROMPT = """You are a helpful customer service assistant for a field service company.
You write polite, concise and professional SMS messages."""

# Placeholders: {customer_name}, {technician_name}, {job_line}, {situation}, {reason_section}
CUSTOMER_NOTIFICATION_PROMPT = """Write an SMS message to a customer. The tone should adapt to the situation.

- Customer's Name: {customer_name}
- Technician's Name: {technician_name}
{job_line}
{situation}
{reason_section}
Do not include salutations like "Sincerely" or a company name. Keep it brief for an SMS."""

# Placeholders: {delay_minutes}, {job_reference}, {technician_name}
DELAY_SITUATION = """This is a proactive alert about a potential delay.
- Estimated Delay: {delay_minutes} minutes

The message should:
1. Greet the customer by name.
2. Reference their service appointment{job_reference}.
3. Inform them that their technician, {technician_name}, might be running late by approximately {delay_minutes} minutes.
4. Apologize for any inconvenience."""

# Placeholders: {new_time}, {job_reference}
RESCHEDULE_SITUATION = """This is a notification about a confirmed schedule change.
- New Appointment Time: {new_time}

The message should:
1. Greet the customer by name.
2. Inform them that their appointment{job_reference} has been rescheduled.
3. Clearly state the new appointment is for {new_time}.
4. Apologize for the change and advise them to call our office if this new time is inconvenient."""
