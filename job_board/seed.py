"""Built-in listings served until anything has been saved."""
from .schemas import Job

_SEED = [
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "company": "TechCorp Solutions",
        "location": "Bangalore, India",
        "experience": "3-5 years",
        "salary": "₹15-25 LPA",
        "datePosted": "2025-10-24T00:00:00Z",
        "jobType": "Full-time",
        "description": "We are looking for an experienced Frontend Developer to join our dynamic team. "
        "You will be responsible for building and maintaining user interfaces for our web applications.",
        "requirements": [
            "Strong proficiency in React, TypeScript, and modern JavaScript",
            "3+ years of experience in frontend development",
            "Knowledge of responsive design and CSS frameworks",
        ],
        "responsibilities": [
            "Develop new user-facing features using React",
            "Build reusable components and front-end libraries",
            "Collaborate with backend developers and designers",
        ],
        "benefits": ["Health Insurance", "Work from Home", "Flexible Hours", "Learning Budget"],
        "contactEmail": "careers@techcorp.com",
        "contactWhatsApp": "+91-9876543210",
    },
    {
        "id": "2",
        "title": "UI/UX Designer",
        "company": "DesignHub Inc.",
        "location": "Mumbai, India",
        "experience": "2-4 years",
        "salary": "₹10-18 LPA",
        "datePosted": "2025-10-25T00:00:00Z",
        "jobType": "Full-time",
        "description": "Join our creative team as a UI/UX Designer and help craft beautiful, "
        "intuitive user experiences for our digital products.",
        "requirements": [
            "Proficiency in Figma, Adobe XD, or Sketch",
            "Strong portfolio demonstrating UI/UX design skills",
            "Experience with prototyping and wireframing",
        ],
        "responsibilities": [
            "Create user-centered designs for web and mobile applications",
            "Conduct user research and usability testing",
            "Maintain and evolve design systems",
        ],
        "benefits": ["Creative Environment", "Latest Tools", "Team Outings"],
        "contactEmail": "hr@designhub.com",
        "contactWhatsApp": "+91-9876543211",
    },
    {
        "id": "3",
        "title": "Full Stack Developer Intern",
        "company": "StartupXYZ",
        "location": "Delhi, India",
        "experience": "0-1 years",
        "salary": "₹20,000-30,000/month",
        "datePosted": "2025-10-26T00:00:00Z",
        "jobType": "Internship",
        "description": "Looking for passionate interns to join our team and work on real-world projects. "
        "Great learning opportunity for fresh graduates.",
        "requirements": [
            "Basic knowledge of web development (HTML, CSS, JavaScript)",
            "Familiarity with React or Vue.js",
            "Eagerness to learn and adapt",
        ],
        "responsibilities": [
            "Assist in developing web applications",
            "Participate in code reviews",
            "Contribute to team projects",
        ],
        "benefits": ["Mentorship", "Certificate", "Pre-Placement Offer"],
        "contactEmail": "intern@startupxyz.com",
        "contactWhatsApp": "+91-9876543212",
    },
    {
        "id": "4",
        "title": "DevOps Engineer",
        "company": "CloudScale Systems",
        "location": "Hyderabad, India",
        "experience": "4-7 years",
        "salary": "₹20-35 LPA",
        "datePosted": "2025-10-23T00:00:00Z",
        "jobType": "Full-time",
        "description": "Seeking an experienced DevOps Engineer to manage our cloud infrastructure "
        "and implement CI/CD pipelines.",
        "requirements": [
            "Strong experience with AWS/Azure/GCP",
            "Proficiency in Docker and Kubernetes",
            "Knowledge of infrastructure as code (Terraform, Ansible)",
        ],
        "responsibilities": [
            "Manage and optimize cloud infrastructure",
            "Implement and maintain CI/CD pipelines",
            "Automate deployment processes",
        ],
        "benefits": ["Remote Work", "Stock Options", "Conference Budget"],
        "contactEmail": "devops@cloudscale.com",
        "contactWhatsApp": "+91-9876543213",
    },
    {
        "id": "5",
        "title": "Product Manager",
        "company": "InnovateLabs",
        "location": "Pune, India",
        "experience": "5-8 years",
        "salary": "₹25-40 LPA",
        "datePosted": "2025-10-22T00:00:00Z",
        "jobType": "Full-time",
        "description": "Lead product strategy and execution for our SaaS platform. "
        "Work with cross-functional teams to deliver exceptional products.",
        "requirements": [
            "5+ years of product management experience",
            "Experience with Agile methodologies",
            "Excellent communication skills",
        ],
        "responsibilities": [
            "Define product vision and strategy",
            "Gather and prioritize requirements",
            "Track and analyze product metrics",
        ],
        "benefits": ["Equity", "Flexible Hours", "Health Insurance"],
        "contactEmail": "pm@innovatelabs.com",
        "contactWhatsApp": "+91-9876543214",
    },
    {
        "id": "6",
        "title": "Backend Developer",
        "company": "DataFlow Technologies",
        "location": "Chennai, India",
        "experience": "2-5 years",
        "salary": "₹12-22 LPA",
        "datePosted": "2025-10-25T00:00:00Z",
        "jobType": "Full-time",
        "description": "Join our backend team to build scalable APIs and services that power our applications.",
        "requirements": [
            "Strong proficiency in Node.js or Python",
            "Experience with databases (PostgreSQL, MongoDB)",
            "Knowledge of RESTful API design",
        ],
        "responsibilities": [
            "Design and develop backend APIs",
            "Optimize database queries and performance",
            "Write unit and integration tests",
        ],
        "benefits": ["Work from Home", "Learning Budget", "Team Events"],
        "contactEmail": "backend@dataflow.com",
        "contactWhatsApp": "+91-9876543215",
    },
]


def seed_jobs() -> list[Job]:
    return [Job.model_validate(raw) for raw in _SEED]
