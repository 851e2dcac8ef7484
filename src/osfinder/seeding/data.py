"""Curated reference data loaded by the seeder.

Alternatives name the proprietary products they replace by slug; the seeder
resolves those slugs and infers categories, so no alternative lists its own
categories here.
"""


def _category(name: str, slug: str, description: str) -> dict:
    return {"name": name, "slug": slug, "description": description}


def _stack(name: str, slug: str, category: str, description: str) -> dict:
    return {"name": name, "slug": slug, "category": category, "description": description}


CATEGORIES: list[dict] = [
    # AI & Machine Learning
    _category("AI & Machine Learning", "ai-machine-learning", "Artificial intelligence and machine learning tools"),
    _category("AI Development Platforms", "ai-development-platforms", "Platforms for building AI applications"),
    _category("Machine Learning Infrastructure", "machine-learning-infrastructure", "Infrastructure for ML workflows"),
    _category("AI Security & Privacy", "ai-security-privacy", "Security and privacy tools for AI"),
    _category("AI Interaction & Interfaces", "ai-interaction-interfaces", "AI chatbots and interaction tools"),
    # Business
    _category("Business Software", "business-software", "Software for business operations"),
    _category("CRM & Sales", "crm-sales", "Customer relationship management and sales tools"),
    _category("ERP & Operations", "erp-operations", "Enterprise resource planning systems"),
    _category("Finance & Accounting", "finance-accounting", "Financial and accounting software"),
    _category("Human Resources (HR)", "human-resources-hr", "HR management tools"),
    _category("Marketing & Customer Engagement", "marketing-customer-engagement", "Marketing automation and engagement tools"),
    _category("Customer Support & Success", "customer-support-success", "Customer support and success platforms"),
    # Communication
    _category("Communication & Collaboration", "communication-collaboration", "Team communication and collaboration tools"),
    _category("Team Chat & Messaging", "team-chat-messaging", "Real-time team messaging platforms"),
    _category("Video Conferencing", "video-conferencing", "Video meeting and conferencing tools"),
    _category("Email & Newsletters", "email-newsletters", "Email clients and newsletter platforms"),
    _category("Project Management", "project-management", "Project and task management tools"),
    _category("Document Collaboration", "document-collaboration", "Collaborative document editing"),
    _category("Knowledge Management", "knowledge-management", "Knowledge bases and wikis"),
    # Content
    _category("Content & Media", "content-media", "Content creation and media tools"),
    _category("Content Management (CMS)", "content-management-cms", "Content management systems"),
    _category("Blogging Platforms", "blogging-platforms", "Blog creation and publishing"),
    _category("Digital Asset Management", "digital-asset-management", "Managing digital assets"),
    _category("Video & Audio", "video-audio", "Video and audio editing tools"),
    _category("Podcasting", "podcasting", "Podcast creation and hosting"),
    _category("Social Media", "social-media", "Social media management"),
    # Design
    _category("Design & Creative", "design-creative", "Design and creative tools"),
    _category("Graphic Design", "graphic-design", "Graphic design software"),
    _category("UI/UX Design", "ui-ux-design", "User interface and experience design"),
    _category("Prototyping & Wireframing", "prototyping-wireframing", "Prototyping and wireframing tools"),
    _category("Photo Editing", "photo-editing", "Photo editing and manipulation"),
    _category("3D & Animation", "3d-animation", "3D modeling and animation"),
    _category("Icon & Illustration", "icon-illustration", "Icons and illustration tools"),
    # Development
    _category("Developer Tools", "developer-tools", "Tools for software development"),
    _category("IDEs & Code Editors", "ides-code-editors", "Integrated development environments"),
    _category("Version Control", "version-control", "Git and version control tools"),
    _category("API Development", "api-development", "API development and testing"),
    _category("CI/CD", "ci-cd", "Continuous integration and deployment"),
    _category("Testing & QA", "testing-qa", "Testing and quality assurance"),
    _category("Code Review", "code-review", "Code review tools"),
    _category("Documentation", "documentation", "Documentation tools"),
    _category("Terminal & CLI", "terminal-cli", "Terminal and command line tools"),
    # Data
    _category("Data & Analytics", "data-analytics", "Data analysis and analytics tools"),
    _category("Business Intelligence", "business-intelligence", "BI and reporting tools"),
    _category("Data Visualization", "data-visualization", "Data visualization tools"),
    _category("ETL & Data Pipelines", "etl-data-pipelines", "Data extraction and transformation"),
    _category("Analytics Platforms", "analytics-platforms", "Web and product analytics"),
    _category("Data Warehousing", "data-warehousing", "Data warehousing solutions"),
    # Storage
    _category("Database & Storage", "database-storage", "Database and storage solutions"),
    _category("Relational Databases", "relational-databases", "SQL databases"),
    _category("NoSQL Databases", "nosql-databases", "NoSQL and document databases"),
    _category("Database Management", "database-management", "Database administration tools"),
    _category("Object Storage", "object-storage", "Object and file storage"),
    _category("Backup & Recovery", "backup-recovery", "Backup and disaster recovery"),
    # DevOps
    _category("DevOps & Infrastructure", "devops-infrastructure", "DevOps and infrastructure tools"),
    _category("Containerization", "containerization", "Container tools like Docker"),
    _category("Orchestration", "orchestration", "Container orchestration"),
    _category("Infrastructure as Code", "infrastructure-as-code", "IaC tools"),
    _category("Monitoring & Observability", "monitoring-observability", "Monitoring and logging tools"),
    _category("Cloud Platforms", "cloud-platforms", "Cloud infrastructure platforms"),
    _category("Serverless", "serverless", "Serverless computing"),
    # Security
    _category("Security & Privacy", "security-privacy", "Security and privacy tools"),
    _category("Authentication & Identity", "authentication-identity", "Auth and identity management"),
    _category("Password Management", "password-management", "Password managers"),
    _category("VPN & Networking", "vpn-networking", "VPN and network security"),
    _category("Encryption", "encryption", "Encryption tools"),
    _category("Security Scanning", "security-scanning", "Security scanning and auditing"),
    # Productivity
    _category("Productivity", "productivity", "Personal and team productivity tools"),
    _category("Note-Taking", "note-taking", "Note-taking applications"),
    _category("Task Management", "task-management", "To-do and task management"),
    _category("Calendar & Scheduling", "calendar-scheduling", "Calendar and scheduling tools"),
    _category("Time Tracking", "time-tracking", "Time tracking and timesheets"),
    _category("Bookmarks & Reading", "bookmarks-reading", "Bookmark managers and read-later apps"),
    _category("Automation", "automation", "Workflow automation tools"),
    # E-commerce
    _category("E-commerce", "e-commerce", "E-commerce platforms and tools"),
    _category("Online Stores", "online-stores", "E-commerce store platforms"),
    _category("Payment Processing", "payment-processing", "Payment gateways and processing"),
    _category("Inventory Management", "inventory-management", "Inventory and stock management"),
    # Education
    _category("Education & Learning", "education-learning", "Educational tools and LMS"),
    _category("Learning Management (LMS)", "learning-management-lms", "Learning management systems"),
    _category("Online Courses", "online-courses", "Course creation platforms"),
    # Other
    _category("Forms & Surveys", "forms-surveys", "Form builders and survey tools"),
    _category("File Sharing", "file-sharing", "File sharing and transfer"),
    _category("Screen Recording", "screen-recording", "Screen capture and recording"),
    _category("Browser Extensions", "browser-extensions", "Browser extensions and tools"),
    _category("Gaming", "gaming", "Gaming and game development"),
    _category("Home Automation", "home-automation", "Smart home and IoT"),
    _category("Health & Fitness", "health-fitness", "Health and fitness tracking"),
    _category("Finance & Budgeting", "finance-budgeting", "Personal finance tools"),
]


TECH_STACKS: list[dict] = [
    # AI
    _stack("OpenAI", "openai", "AI", "AI models and APIs by OpenAI"),
    _stack("Anthropic", "anthropic", "AI", "Claude AI models by Anthropic"),
    _stack("Ollama", "ollama", "AI", "Run LLMs locally"),
    _stack("Hugging Face", "huggingface", "AI", "AI model hub and tools"),
    _stack("LangChain", "langchain", "AI", "LLM application framework"),
    # Languages
    _stack("TypeScript", "typescript", "Language", "Typed JavaScript superset"),
    _stack("JavaScript", "javascript", "Language", "Web programming language"),
    _stack("Python", "python", "Language", "General-purpose programming language"),
    _stack("Go", "go", "Language", "Google's systems language"),
    _stack("Rust", "rust", "Language", "Systems programming language"),
    _stack("Java", "java", "Language", "Enterprise programming language"),
    _stack("PHP", "php", "Language", "Web scripting language"),
    _stack("Ruby", "ruby", "Language", "Dynamic programming language"),
    _stack("Elixir", "elixir", "Language", "Functional programming language"),
    # Frontend
    _stack("React", "react", "Frontend", "UI component library"),
    _stack("Vue.js", "vuejs", "Frontend", "Progressive JavaScript framework"),
    _stack("Angular", "angular", "Frontend", "Google's web framework"),
    _stack("Svelte", "svelte", "Frontend", "Compiler-based framework"),
    _stack("Next.js", "nextjs", "Frontend", "React framework for production"),
    # Backend
    _stack("Node.js", "nodejs", "Backend", "JavaScript runtime"),
    _stack("Django", "django", "Backend", "Python web framework"),
    _stack("Flask", "flask", "Backend", "Python micro framework"),
    _stack("FastAPI", "fastapi", "Backend", "Modern Python API framework"),
    _stack("Rails", "rails", "Backend", "Ruby web framework"),
    _stack("Laravel", "laravel", "Backend", "PHP web framework"),
    _stack("Spring Boot", "spring-boot", "Backend", "Java application framework"),
    _stack("Phoenix", "phoenix", "Backend", "Elixir web framework"),
    # Database
    _stack("PostgreSQL", "postgresql", "Database", "Advanced open source database"),
    _stack("MySQL", "mysql", "Database", "Popular relational database"),
    _stack("MongoDB", "mongodb", "Database", "Document database"),
    _stack("Redis", "redis", "Database", "In-memory data store"),
    _stack("SQLite", "sqlite", "Database", "Embedded SQL database"),
    _stack("Elasticsearch", "elasticsearch", "Database", "Search and analytics engine"),
    _stack("ClickHouse", "clickhouse", "Database", "OLAP database"),
    # DevOps & monitoring
    _stack("Docker", "docker", "DevOps", "Containerization platform"),
    _stack("Kubernetes", "kubernetes", "DevOps", "Container orchestration"),
    _stack("Terraform", "terraform", "DevOps", "Infrastructure as code"),
    _stack("Prometheus", "prometheus", "Monitoring", "Monitoring system"),
    _stack("Grafana", "grafana", "Monitoring", "Observability platform"),
    # Mobile & desktop
    _stack("Flutter", "flutter", "Mobile", "Google's UI toolkit"),
    _stack("React Native", "react-native", "Mobile", "Cross-platform mobile"),
    _stack("Electron", "electron", "Mobile", "Desktop apps with web tech"),
    _stack("Tauri", "tauri", "Mobile", "Desktop app framework"),
    # API
    _stack("GraphQL", "graphql", "API", "Query language for APIs"),
    _stack("WebSocket", "websocket", "API", "Real-time communication"),
]


PROPRIETARY_SOFTWARE: list[dict] = [
    {"name": "ChatGPT", "slug": "chatgpt", "description": "AI chatbot by OpenAI", "website": "https://chat.openai.com"},
    {"name": "Claude", "slug": "claude", "description": "AI assistant by Anthropic for conversations and analysis", "website": "https://claude.ai"},
    {"name": "Notion", "slug": "notion", "description": "All-in-one workspace for notes, docs, and collaboration", "website": "https://notion.so"},
    {"name": "Todoist", "slug": "todoist", "description": "Task management and to-do list app", "website": "https://todoist.com"},
    {"name": "Evernote", "slug": "evernote", "description": "Note-taking and organization app", "website": "https://evernote.com"},
    {"name": "Pocket", "slug": "pocket", "description": "Save articles and videos for later reading", "website": "https://getpocket.com"},
    {"name": "Trello", "slug": "trello", "description": "Kanban boards for organizing projects", "website": "https://trello.com"},
    {"name": "Jira", "slug": "jira", "description": "Project and issue tracking", "website": "https://atlassian.com/jira"},
    {"name": "Slack", "slug": "slack", "description": "Team communication and collaboration platform", "website": "https://slack.com"},
    {"name": "Zoom", "slug": "zoom", "description": "Video conferencing and meetings", "website": "https://zoom.us"},
    {"name": "Intercom", "slug": "intercom", "description": "Customer messaging platform", "website": "https://intercom.com"},
    {"name": "Figma", "slug": "figma", "description": "Collaborative interface design tool", "website": "https://figma.com"},
    {"name": "Adobe Photoshop", "slug": "photoshop", "description": "Professional image editing software", "website": "https://adobe.com/photoshop"},
    {"name": "Loom", "slug": "loom", "description": "Video messaging for work", "website": "https://loom.com"},
    {"name": "Postman", "slug": "postman", "description": "API development and testing platform", "website": "https://postman.com"},
    {"name": "Firebase", "slug": "firebase", "description": "Google app development platform", "website": "https://firebase.google.com"},
    {"name": "Heroku", "slug": "heroku", "description": "Cloud application platform", "website": "https://heroku.com"},
    {"name": "Google Analytics", "slug": "google-analytics", "description": "Web analytics service", "website": "https://analytics.google.com"},
    {"name": "Datadog", "slug": "datadog", "description": "Monitoring and analytics platform", "website": "https://datadoghq.com"},
    {"name": "Dropbox", "slug": "dropbox", "description": "Cloud storage and file sharing", "website": "https://dropbox.com"},
    {"name": "Google Docs", "slug": "google-docs", "description": "Online document editor", "website": "https://docs.google.com"},
    {"name": "Salesforce", "slug": "salesforce", "description": "Customer relationship management platform", "website": "https://salesforce.com"},
    {"name": "Shopify", "slug": "shopify", "description": "E-commerce platform for online stores", "website": "https://shopify.com"},
    {"name": "1Password", "slug": "1password", "description": "Password manager for families and teams", "website": "https://1password.com"},
    {"name": "Auth0", "slug": "auth0", "description": "Identity platform for authentication and authorization", "website": "https://auth0.com"},
    {"name": "Amazon S3", "slug": "amazon-s3", "description": "Cloud object storage service", "website": "https://aws.amazon.com/s3"},
    {"name": "Zapier", "slug": "zapier", "description": "Workflow automation across web apps", "website": "https://zapier.com"},
    {"name": "Typeform", "slug": "typeform", "description": "Conversational form builder", "website": "https://typeform.com"},
]


ALTERNATIVES: list[dict] = [
    {
        "name": "Open WebUI",
        "short_description": "Self-hosted chat interface for local and remote language models",
        "description": "Open WebUI is an extensible, self-hosted AI interface that operates entirely offline. It supports Ollama and OpenAI-compatible APIs with a chat experience similar to ChatGPT.",
        "website": "https://openwebui.com",
        "github": "https://github.com/open-webui/open-webui",
        "license": "BSD-3-Clause",
        "is_self_hosted": True,
        "alternative_to": ["chatgpt", "claude"],
    },
    {
        "name": "AppFlowy",
        "short_description": "Open-source workspace for notes, wikis and projects",
        "description": "AppFlowy is an open-source alternative to Notion that keeps data on your own machine. It combines documents, databases and kanban boards in one workspace.",
        "website": "https://appflowy.io",
        "github": "https://github.com/AppFlowy-IO/AppFlowy",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["notion"],
    },
    {
        "name": "Joplin",
        "short_description": "Note-taking app with markdown and end-to-end encryption",
        "description": "Joplin is a note-taking and to-do application that can handle a large number of notes organised into notebooks, synchronised across devices.",
        "website": "https://joplinapp.org",
        "github": "https://github.com/laurent22/joplin",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["evernote"],
    },
    {
        "name": "Super Productivity",
        "short_description": "To-do list and time tracker for developers",
        "description": "Super Productivity is a task manager with integrated timeboxing and time tracking that imports issues from Jira, GitHub and GitLab.",
        "website": "https://super-productivity.com",
        "github": "https://github.com/johannesjo/super-productivity",
        "license": "MIT",
        "is_self_hosted": False,
        "alternative_to": ["todoist"],
    },
    {
        "name": "Wallabag",
        "short_description": "Self-hosted read-later application",
        "description": "Wallabag saves web pages so you can read them later, stripped of distractions, on any device.",
        "website": "https://wallabag.org",
        "github": "https://github.com/wallabag/wallabag",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["pocket"],
    },
    {
        "name": "Wekan",
        "short_description": "Feature-rich kanban board for teams",
        "description": "Wekan is an open-source kanban board with swimlanes, checklists and WIP limits that runs on your own server.",
        "website": "https://wekan.github.io",
        "github": "https://github.com/wekan/wekan",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["trello"],
    },
    {
        "name": "Plane",
        "short_description": "Open-source issue tracking and project planning",
        "description": "Plane tracks issues, sprints and product roadmaps with cycles and modules for software teams.",
        "website": "https://plane.so",
        "github": "https://github.com/makeplane/plane",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["jira"],
    },
    {
        "name": "Mattermost",
        "short_description": "Secure team messaging for technical organisations",
        "description": "Mattermost is an open-source platform for secure collaboration across the software development lifecycle, with channels, threads and integrations.",
        "website": "https://mattermost.com",
        "github": "https://github.com/mattermost/mattermost",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["slack"],
    },
    {
        "name": "Jitsi Meet",
        "short_description": "Secure, simple and scalable video conferences",
        "description": "Jitsi Meet is a fully encrypted video conferencing application you can self-host or use for free without an account.",
        "website": "https://jitsi.org",
        "github": "https://github.com/jitsi/jitsi-meet",
        "license": "Apache-2.0",
        "is_self_hosted": True,
        "alternative_to": ["zoom"],
    },
    {
        "name": "Chatwoot",
        "short_description": "Customer support platform with shared inbox",
        "description": "Chatwoot is an open-source customer support tool that brings live chat, email and social channels into one helpdesk.",
        "website": "https://chatwoot.com",
        "github": "https://github.com/chatwoot/chatwoot",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["intercom"],
    },
    {
        "name": "Penpot",
        "short_description": "Design and prototyping platform for cross-domain teams",
        "description": "Penpot is a web-based design tool built on open standards for interface design and interactive prototyping.",
        "website": "https://penpot.app",
        "github": "https://github.com/penpot/penpot",
        "license": "MPL-2.0",
        "is_self_hosted": True,
        "alternative_to": ["figma"],
    },
    {
        "name": "GIMP",
        "short_description": "GNU image manipulation program",
        "description": "GIMP is a cross-platform image editor for photo retouching, image composition and image authoring.",
        "website": "https://gimp.org",
        "github": "https://github.com/GNOME/gimp",
        "license": "GPL-3.0",
        "is_self_hosted": False,
        "alternative_to": ["photoshop"],
    },
    {
        "name": "Cap",
        "short_description": "Open-source screen recording and sharing",
        "description": "Cap is a lightweight screen recorder for sharing quick video messages with teammates.",
        "website": "https://cap.so",
        "github": "https://github.com/CapSoftware/Cap",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["loom"],
    },
    {
        "name": "Hoppscotch",
        "short_description": "Lightweight API development ecosystem",
        "description": "Hoppscotch is a web-based client for building and testing REST, GraphQL and WebSocket requests.",
        "website": "https://hoppscotch.io",
        "github": "https://github.com/hoppscotch/hoppscotch",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["postman"],
    },
    {
        "name": "Supabase",
        "short_description": "Postgres development platform with auth and storage",
        "description": "Supabase gives every project a Postgres database with authentication, instant APIs, realtime subscriptions and storage.",
        "website": "https://supabase.com",
        "github": "https://github.com/supabase/supabase",
        "license": "Apache-2.0",
        "is_self_hosted": True,
        "alternative_to": ["firebase"],
    },
    {
        "name": "Coolify",
        "short_description": "Self-hostable platform for deploying apps and databases",
        "description": "Coolify is an open-source PaaS that deploys applications, databases and services to your own servers.",
        "website": "https://coolify.io",
        "github": "https://github.com/coollabsio/coolify",
        "license": "Apache-2.0",
        "is_self_hosted": True,
        "alternative_to": ["heroku"],
    },
    {
        "name": "Plausible Analytics",
        "short_description": "Privacy-friendly web analytics",
        "description": "Plausible is lightweight web analytics with no cookies, fully compliant with GDPR.",
        "website": "https://plausible.io",
        "github": "https://github.com/plausible/analytics",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["google-analytics"],
    },
    {
        "name": "SigNoz",
        "short_description": "Open-source observability with logs, metrics and traces",
        "description": "SigNoz is an OpenTelemetry-native monitoring platform with dashboards and alerts in a single application.",
        "website": "https://signoz.io",
        "github": "https://github.com/SigNoz/signoz",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["datadog"],
    },
    {
        "name": "Nextcloud",
        "short_description": "Self-hosted file sync and collaboration",
        "description": "Nextcloud provides file sharing, calendars, contacts and online office on infrastructure you control.",
        "website": "https://nextcloud.com",
        "github": "https://github.com/nextcloud/server",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["dropbox", "google-docs"],
    },
    {
        "name": "Twenty",
        "short_description": "Modern open-source CRM",
        "description": "Twenty is a CRM built by the community for managing contacts, companies and sales opportunities.",
        "website": "https://twenty.com",
        "github": "https://github.com/twentyhq/twenty",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["salesforce"],
    },
    {
        "name": "Medusa",
        "short_description": "Composable commerce engine for developers",
        "description": "Medusa is an open-source e-commerce platform with a modular architecture for building online stores.",
        "website": "https://medusajs.com",
        "github": "https://github.com/medusajs/medusa",
        "license": "MIT",
        "is_self_hosted": True,
        "alternative_to": ["shopify"],
    },
    {
        "name": "Bitwarden",
        "short_description": "Open-source password manager for individuals and teams",
        "description": "Bitwarden stores passwords and secrets in an end-to-end encrypted vault that syncs across devices.",
        "website": "https://bitwarden.com",
        "github": "https://github.com/bitwarden/server",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["1password"],
    },
    {
        "name": "Keycloak",
        "short_description": "Identity and access management for applications",
        "description": "Keycloak adds single sign-on and authentication to applications with minimal effort.",
        "website": "https://keycloak.org",
        "github": "https://github.com/keycloak/keycloak",
        "license": "Apache-2.0",
        "is_self_hosted": True,
        "alternative_to": ["auth0"],
    },
    {
        "name": "MinIO",
        "short_description": "High-performance S3 compatible object storage",
        "description": "MinIO is a high-performance object storage server compatible with the Amazon S3 API.",
        "website": "https://min.io",
        "github": "https://github.com/minio/minio",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["amazon-s3"],
    },
    {
        "name": "n8n",
        "short_description": "Fair-code workflow automation",
        "description": "n8n connects apps and services with a node-based editor and runs automation workflows on your own infrastructure.",
        "website": "https://n8n.io",
        "github": "https://github.com/n8n-io/n8n",
        "license": "Sustainable Use License",
        "is_self_hosted": True,
        "alternative_to": ["zapier"],
    },
    {
        "name": "Formbricks",
        "short_description": "Open-source survey and form platform",
        "description": "Formbricks builds in-app, website and link surveys with targeting and integrations.",
        "website": "https://formbricks.com",
        "github": "https://github.com/formbricks/formbricks",
        "license": "AGPL-3.0",
        "is_self_hosted": True,
        "alternative_to": ["typeform"],
    },
]
