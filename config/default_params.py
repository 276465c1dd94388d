"""Default parameters and presets for the projection console."""

CHANNEL_LABELS = {
    'primary': 'Meta (FB/IG)',
    'secondary': 'Google Search',
}

# Lead -> appointment rate options shown in the console
APPT_RATE_PRESETS = {
    'Conservative (10%)': 0.10,
    'Typical (20%)': 0.20,
    'Dialed-in (27%)': 0.27,
}

# Platform CPL improvement vs a generic vendor
EFFICIENCY_PRESETS = {
    'No improvement': 0.0,
    '15% lower CPL': 0.15,
    '30% lower CPL': 0.30,
}

# (min, max) accepted by the input layer; None = unbounded
INPUT_BOUNDS = {
    'client_spend': (0.0, None),
    'credit_a': (0.0, None),
    'credit_b': (0.0, None),
    'funded_cap': (0.0, None),
    'lead_to_appt_rate': (0.0, 1.0),
    'efficiency_uplift': (0.0, 0.99),
    'baseline_cost_primary': (1.0, None),
    'baseline_cost_secondary': (1.0, None),
    'commission_rate': (0.0, 1.0),
    'close_rate': (0.0, 1.0),
}

# Default grid for the uplift sensitivity chart
UPLIFT_SWEEP = {
    'start': 0.0,
    'stop': 0.5,
    'num': 11,
}

GLOSSARY = [
    ('CPL', 'Cost Per Lead. Dollars spent to generate one lead.'),
    ('Appointment Rate', '% of leads that book an appointment (Lead -> Appointment).'),
    ('CPA', 'Cost Per Appointment. Total spend divided by appointments.'),
    ('ACV', 'Average Client Value. ACV = Metro Avg Price x Commission Rate.'),
    ('Close Rate', '% appointments that close into clients (Appointment -> Closed).'),
    ('Media Credit', 'Extra paid media the platform contributes.'),
    ('Growth Partner Credit', 'Additional funded media from partners.'),
    ('Funded Cap', 'The maximum total credit allowed in projections.'),
    ('Platform Budget', 'Client spend plus funded media used in platform projections.'),
    ('Efficiency', 'Platform CPL improvement vs competitor (e.g., 15% lower CPL).'),
    ('Cost of Waiting', 'Estimated monthly revenue forfeited if launch is delayed 30 days.'),
    ('Delta Revenue', 'Platform revenue minus competitor revenue for the same period.'),
]

UI_TEXT = {
    'title': 'Live Projection Calculator',
    'kicker': 'Internal Use Only',
    'tagline': 'No forms. No CTAs. Screen-share only.',
    'summary_note': 'This block is read-only for screen share. No data is collected from the prospect.',
    'roi_note': 'Adjust commission and close-rate to your niche. ACV is linked to metro average price x commission.',
    'footer': (
        'For internal demonstration only. Media credits apply to paid media only and do not '
        'reduce service fees. Client retains ownership of ad accounts, creatives, data, and dashboards.'
    ),
}
