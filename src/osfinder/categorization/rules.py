"""
Shipped keyword rules for category inference.

Ordering matters: earlier matches win. Product names come before the generic
terms that would also match their descriptions (a Trello clone also mentions
"workflow" and "collaboration"). Each rule lists exactly three slugs from the
seeded taxonomy, most specific first.
"""

from .matcher import CategoryRule

# Used when no rule resolves three known slugs.
DEFAULT_CATEGORY_SLUGS: tuple[str, ...] = (
    "developer-tools",
    "productivity",
    "business-software",
)


def _rule(keywords: list[str], categories: list[str]) -> CategoryRule:
    return CategoryRule(keywords=tuple(keywords), categories=tuple(categories))


CATEGORY_RULES: list[CategoryRule] = [
    # Project and task tools
    _rule(
        ["trello", "kanban", "asana", "jira", "monday.com", "clickup", "basecamp"],
        ["project-management", "task-management", "productivity"],
    ),
    _rule(
        ["todoist", "to-do list", "todo list", "things 3", "microsoft to do"],
        ["task-management", "productivity", "project-management"],
    ),
    _rule(
        ["toggl", "harvest", "clockify", "time tracking", "timesheet"],
        ["time-tracking", "productivity", "project-management"],
    ),
    _rule(
        ["calendly", "google calendar", "scheduling", "appointment"],
        ["calendar-scheduling", "productivity", "business-software"],
    ),
    # Notes and knowledge
    _rule(
        ["notion", "evernote", "onenote", "obsidian", "note-taking", "notes app"],
        ["note-taking", "knowledge-management", "productivity"],
    ),
    _rule(
        ["confluence", "wiki", "knowledge base"],
        ["knowledge-management", "documentation", "communication-collaboration"],
    ),
    _rule(
        ["gitbook", "readme.io", "documentation site", "api docs"],
        ["documentation", "developer-tools", "knowledge-management"],
    ),
    # AI
    _rule(
        ["chatgpt", "claude", "chatbot", "conversational ai", "language model", "llm"],
        ["ai-interaction-interfaces", "ai-machine-learning", "ai-development-platforms"],
    ),
    _rule(
        ["weights and biases", "mlops", "ml ops", "experiment tracking", "machine learning"],
        ["machine-learning-infrastructure", "ai-machine-learning", "ai-development-platforms"],
    ),
    _rule(
        ["transcription", "speech recognition", "otter.ai"],
        ["ai-machine-learning", "video-audio", "productivity"],
    ),
    # Communication
    _rule(
        ["slack", "discord", "microsoft teams", "team chat", "messaging"],
        ["team-chat-messaging", "communication-collaboration", "productivity"],
    ),
    _rule(
        ["zoom", "google meet", "webex", "video conferenc", "video call"],
        ["video-conferencing", "communication-collaboration", "video-audio"],
    ),
    _rule(
        ["mailchimp", "convertkit", "substack", "newsletter", "email marketing"],
        ["email-newsletters", "marketing-customer-engagement", "business-software"],
    ),
    _rule(
        ["gmail", "outlook", "email client", "webmail", "mail server"],
        ["email-newsletters", "communication-collaboration", "productivity"],
    ),
    # Business
    _rule(
        ["salesforce", "hubspot", "pipedrive", "crm"],
        ["crm-sales", "business-software", "marketing-customer-engagement"],
    ),
    _rule(
        ["zendesk", "intercom", "freshdesk", "helpdesk", "help desk", "customer support"],
        ["customer-support-success", "business-software", "communication-collaboration"],
    ),
    _rule(
        ["quickbooks", "xero", "freshbooks", "accounting", "invoicing", "bookkeeping"],
        ["finance-accounting", "business-software", "erp-operations"],
    ),
    _rule(
        ["ynab", "personal finance", "budgeting", "expense tracking"],
        ["finance-budgeting", "finance-accounting", "productivity"],
    ),
    _rule(
        ["odoo", "netsuite", "enterprise resource planning", "erp system"],
        ["erp-operations", "business-software", "inventory-management"],
    ),
    _rule(
        ["bamboohr", "workday", "human resources", "payroll", "recruiting", "applicant tracking"],
        ["human-resources-hr", "business-software", "erp-operations"],
    ),
    _rule(
        ["typeform", "google forms", "surveymonkey", "jotform", "form builder", "survey"],
        ["forms-surveys", "business-software", "marketing-customer-engagement"],
    ),
    # Commerce
    _rule(
        ["shopify", "woocommerce", "bigcommerce", "e-commerce", "ecommerce", "online store"],
        ["e-commerce", "online-stores", "payment-processing"],
    ),
    _rule(
        ["stripe", "paypal", "payment gateway", "payments"],
        ["payment-processing", "e-commerce", "finance-accounting"],
    ),
    _rule(
        ["inventory", "stock management", "warehouse management"],
        ["inventory-management", "erp-operations", "business-software"],
    ),
    # Design
    _rule(
        ["figma", "adobe xd", "sketch app", "prototyp", "wireframe", "mockup"],
        ["ui-ux-design", "prototyping-wireframing", "design-creative"],
    ),
    _rule(
        ["photoshop", "lightroom", "photo edit", "raster graphics"],
        ["photo-editing", "graphic-design", "design-creative"],
    ),
    _rule(
        ["illustrator", "canva", "vector graphics", "graphic design"],
        ["graphic-design", "icon-illustration", "design-creative"],
    ),
    _rule(
        ["maya", "3ds max", "cinema 4d", "3d model", "3d animation", "3d creation"],
        ["3d-animation", "design-creative", "gaming"],
    ),
    # Media
    _rule(
        ["loom", "snagit", "camtasia", "screen record", "screen capture", "screenshot"],
        ["screen-recording", "video-audio", "productivity"],
    ),
    _rule(
        ["premiere", "final cut", "davinci", "video edit"],
        ["video-audio", "content-media", "design-creative"],
    ),
    _rule(
        ["podcast"],
        ["podcasting", "video-audio", "content-media"],
    ),
    _rule(
        ["spotify", "plex", "music", "audio", "streaming media"],
        ["video-audio", "content-media", "podcasting"],
    ),
    _rule(
        ["brandfolder", "bynder", "digital asset", "photo library", "google photos"],
        ["digital-asset-management", "content-media", "file-sharing"],
    ),
    _rule(
        ["wordpress", "contentful", "headless cms", "content management"],
        ["content-management-cms", "blogging-platforms", "content-media"],
    ),
    _rule(
        ["medium", "ghost", "blog"],
        ["blogging-platforms", "content-management-cms", "content-media"],
    ),
    _rule(
        ["twitter", "facebook", "instagram", "reddit", "buffer", "hootsuite", "social media", "social network"],
        ["social-media", "marketing-customer-engagement", "content-media"],
    ),
    # Data
    _rule(
        ["tableau", "power bi", "looker", "metabase", "business intelligence"],
        ["business-intelligence", "data-visualization", "data-analytics"],
    ),
    _rule(
        ["fivetran", "airflow", "etl", "data pipeline", "data integration"],
        ["etl-data-pipelines", "data-analytics", "data-warehousing"],
    ),
    _rule(
        ["snowflake", "bigquery", "redshift", "data warehouse", "olap"],
        ["data-warehousing", "data-analytics", "database-storage"],
    ),
    _rule(
        ["google analytics", "mixpanel", "amplitude", "web analytics", "product analytics"],
        ["analytics-platforms", "data-analytics", "marketing-customer-engagement"],
    ),
    _rule(
        ["chart", "visualization", "dashboard"],
        ["data-visualization", "business-intelligence", "data-analytics"],
    ),
    # Storage
    _rule(
        ["firebase", "mongodb", "nosql", "document database", "key-value"],
        ["nosql-databases", "database-storage", "serverless"],
    ),
    _rule(
        ["oracle", "sql server", "mysql", "postgres", "relational database"],
        ["relational-databases", "database-storage", "database-management"],
    ),
    _rule(
        ["airtable", "database gui", "sql client", "database management"],
        ["database-management", "database-storage", "developer-tools"],
    ),
    _rule(
        ["amazon s3", "cloudflare r2", "object storage", "s3 compatible"],
        ["object-storage", "database-storage", "cloud-platforms"],
    ),
    _rule(
        ["dropbox", "google drive", "onedrive", "wetransfer", "file sync", "file sharing"],
        ["file-sharing", "object-storage", "backup-recovery"],
    ),
    _rule(
        ["backblaze", "crashplan", "backup"],
        ["backup-recovery", "database-storage", "file-sharing"],
    ),
    # DevOps
    _rule(
        ["kubernetes", "nomad", "orchestrat"],
        ["orchestration", "containerization", "devops-infrastructure"],
    ),
    _rule(
        ["docker", "container"],
        ["containerization", "devops-infrastructure", "orchestration"],
    ),
    _rule(
        ["terraform", "pulumi", "ansible", "infrastructure as code"],
        ["infrastructure-as-code", "devops-infrastructure", "cloud-platforms"],
    ),
    _rule(
        ["datadog", "new relic", "splunk", "sentry", "observability", "monitoring", "logging"],
        ["monitoring-observability", "devops-infrastructure", "developer-tools"],
    ),
    _rule(
        ["jenkins", "circleci", "github actions", "travis", "ci/cd", "continuous integration"],
        ["ci-cd", "devops-infrastructure", "developer-tools"],
    ),
    _rule(
        ["heroku", "vercel", "netlify", "aws lambda", "serverless", "paas"],
        ["cloud-platforms", "serverless", "devops-infrastructure"],
    ),
    # Development
    _rule(
        ["github", "gitlab", "bitbucket", "gitea", "version control"],
        ["version-control", "developer-tools", "code-review"],
    ),
    _rule(
        ["vs code", "vscode", "visual studio", "intellij", "code editor", "cloud ide", "development environment"],
        ["ides-code-editors", "developer-tools", "productivity"],
    ),
    _rule(
        ["terminal", "command line", "shell", "cli"],
        ["terminal-cli", "developer-tools", "productivity"],
    ),
    _rule(
        ["browserstack", "selenium", "end-to-end test", "testing"],
        ["testing-qa", "developer-tools", "ci-cd"],
    ),
    _rule(
        ["postman", "insomnia", "api"],
        ["api-development", "developer-tools", "testing-qa"],
    ),
    _rule(
        ["retool", "low-code", "internal tools", "no-code"],
        ["developer-tools", "automation", "business-software"],
    ),
    # Security
    _rule(
        ["1password", "lastpass", "dashlane", "bitwarden", "password manager"],
        ["password-management", "security-privacy", "encryption"],
    ),
    _rule(
        ["auth0", "okta", "sso", "identity", "authentication", "2fa", "authenticator"],
        ["authentication-identity", "security-privacy", "developer-tools"],
    ),
    _rule(
        ["nordvpn", "expressvpn", "vpn", "firewall", "reverse proxy"],
        ["vpn-networking", "security-privacy", "encryption"],
    ),
    _rule(
        ["snyk", "vulnerability", "security scan", "penetration test"],
        ["security-scanning", "security-privacy", "developer-tools"],
    ),
    _rule(
        ["vault", "secrets", "encryption", "encrypted"],
        ["encryption", "security-privacy", "devops-infrastructure"],
    ),
    # Everything else
    _rule(
        ["udemy", "coursera", "teachable", "online course"],
        ["online-courses", "education-learning", "learning-management-lms"],
    ),
    _rule(
        ["moodle", "blackboard", "canvas lms", "lms", "learning"],
        ["learning-management-lms", "education-learning", "online-courses"],
    ),
    _rule(
        ["unity", "unreal", "game engine", "game"],
        ["gaming", "3d-animation", "developer-tools"],
    ),
    _rule(
        ["smartthings", "home assistant", "smart home", "home automation", "iot"],
        ["home-automation", "automation", "productivity"],
    ),
    _rule(
        ["strava", "myfitnesspal", "fitness", "workout"],
        ["health-fitness", "productivity", "calendar-scheduling"],
    ),
    _rule(
        ["pocket", "instapaper", "raindrop", "bookmark", "read-later", "rss", "feedly"],
        ["bookmarks-reading", "productivity", "browser-extensions"],
    ),
    _rule(
        ["chrome extension", "browser extension", "browser"],
        ["browser-extensions", "productivity", "security-privacy"],
    ),
    _rule(
        ["zapier", "ifttt", "make.com", "automation", "workflow"],
        ["automation", "productivity", "business-software"],
    ),
    _rule(
        ["google docs", "microsoft word", "microsoft office", "office suite", "spreadsheet", "document"],
        ["document-collaboration", "productivity", "communication-collaboration"],
    ),
    _rule(
        ["search engine", "privacy"],
        ["security-privacy", "browser-extensions", "encryption"],
    ),
    _rule(
        ["launcher", "productivity"],
        ["productivity", "automation", "task-management"],
    ),
]
