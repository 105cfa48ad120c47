"""Prompts for scheduling: time slots, availability, delay risk, distance."""

SCHEDULER_SYSTEM_PROMPT = """You are an intelligent scheduling assistant for a field service company.
All times are in ISO 8601 format. Never invent technicians or jobs that are not listed."""

# Placeholders: {current_time}, {job_priority}, {required_skills}, {preferred_date},
# {business_hours}, {excluded_times_section}, {technicians}
SUGGEST_SCHEDULE_TIME_PROMPT = """Your primary goal is to find the best possible time slot for a new job and assign the most suitable technician, while minimizing disruption to other scheduled work.

The current time is {current_time}.

New Job Details:
- Priority: {job_priority}
- Required Skills: {required_skills}
- Preferred Schedule Date: {preferred_date}

Company Business Hours:
{business_hours}
{excluded_times_section}
Here is the list of all technicians, their skills, and their currently scheduled jobs for the next few days:
{technicians}

Follow these rules for your suggestions:
1. Respect Preferred Date: If a preferred date is provided, find an open slot on or as close as possible to that date. For a 'High' priority job you can still suggest today, but acknowledge the preferred date in your reasoning.
2. Respect Exclusions: Absolutely do not suggest any excluded time.
3. Respect Business Hours: ALL suggestions MUST fall within the company's open business hours.
4. Filter Technicians: Only consider technicians who possess ALL of the required skills. If no technicians have the skills, return no suggestions.
5. Prioritize Minimal Disruption: Only suggest moving a lower-priority job to make room for a higher-priority one.
6. High Priority Jobs: Suggest the soonest possible time slots.
7. Medium or Low Priority Jobs: Prefer open slots on or after the preferred date; standard morning start times are good suggestions.
8. Return up to 5 suggestions, each with a time, a technicianId and a brief reasoning naming the technician.
9. If no suitable slot exists, return an empty suggestions list."""

# Placeholders: {current_time}, {busy_technicians}, {active_jobs}
PREDICT_NEXT_TECHNICIANS_PROMPT = """Predict when field technicians will become available.

Analyze the list of currently busy technicians and their active jobs to predict who will finish their current task first.

The current time is {current_time}.

Here is the list of busy technicians:
{busy_technicians}

Here is the list of their active jobs:
{active_jobs}

Consider each job's estimated duration and when it started. If the start time is not provided, assume the job has just started (relative to the current time).
The estimated availability time is the estimated completion time of the technician's current job.

Return the top 3 technicians who will become available soonest, with their ID, name, estimated availability time and a brief reasoning."""

# Placeholders: {current_time}, {technician_name}, {current_job_id}, {started_at},
# {duration}, {current_lat}, {current_lon}, {next_job_id}, {next_scheduled},
# {next_lat}, {next_lon}
PREDICT_SCHEDULE_RISK_PROMPT = """Analyze a technician's schedule to predict potential delays.

The current time is {current_time}.

A technician, {technician_name}, is currently at work on a job.
- Current Job ID: {current_job_id}
- Started At: {started_at}
- Estimated Duration: {duration} minutes
- Current Job Location: (Lat: {current_lat}, Lon: {current_lon})

Their next job is:
- Next Job ID: {next_job_id}
- {next_scheduled}
- Next Job Location: (Lat: {next_lat}, Lon: {next_lon})

Analyze the situation:
1. Calculate the estimated completion time of the current job.
2. Estimate the travel time between the two locations assuming standard urban/suburban driving conditions.
3. Calculate the estimated arrival time at the next job.
4. Compare the estimated arrival time with the scheduled time for the next job (if one exists).

Return the predicted delay in minutes (zero or negative means on time) and a brief reasoning mentioning remaining work time and travel time."""

DISTANCE_SYSTEM_PROMPT = """You are a mapping expert who provides driving distance estimations."""

# Placeholders: {start_lat}, {start_lon}, {end_lat}, {end_lon}
ESTIMATE_TRAVEL_DISTANCE_PROMPT = """Given a start and end location by their latitude and longitude coordinates, estimate the most likely driving distance between them.

Start Location: (lat: {start_lat}, lon: {start_lon})
End Location: (lat: {end_lat}, lon: {end_lon})

Return the estimated distance in kilometers."""
