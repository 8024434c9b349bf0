"""Fixed selection catalogs offered to recruiters."""

PREDEFINED_SKILLS: tuple[str, ...] = (
    "AI", "ML", "NLP", "Generative AI", "MEARN Stack", "Full Stack", "PHP", "Laravel",
    "Node.js", "Transflow", "Python", "Microsoft Dynamics", "Oracle Netsuit",
    "Deep Learning", "React", "Angular", "Vue.js", "TypeScript", "JavaScript",
    "Java", "C#", "C++", "Go", "Rust", "Kotlin", "Swift", "Dart", "Flutter",
    "Spring Boot", "ASP.NET", "Ruby on Rails", "SQL", "MySQL", "PostgreSQL",
    "MongoDB", "Firebase", "Redis", "GraphQL", "REST API", "Docker", "Kubernetes",
    "AWS", "Azure", "Google Cloud", "CI/CD", "Git", "Jenkins", "Terraform",
    "Ansible", "Linux", "Bash", "PowerShell", "Agile", "Scrum", "JIRA",
    "Confluence", "Data Science", "Big Data", "Hadoop", "Spark", "Pandas", "NumPy",
    "TensorFlow", "PyTorch", "OpenCV", "Matplotlib", "Scikit-learn", "LLMs",
    "ChatGPT API", "Prompt Engineering", "LangChain", "Vector DBs", "Pinecone",
    "Qdrant", "Weaviate", "Cybersecurity", "Penetration Testing", "Ethical Hacking",
    "SIEM", "SOC", "DevSecOps", "ISO 27001", "Blockchain", "Solidity",
    "Smart Contracts", "Web3.js", "NFTs", "Metaverse", "Digital Twins", "IoT",
    "Edge Computing", "Robotic Process Automation", "Power BI", "Tableau", "Looker",
    "Salesforce", "HubSpot", "Shopify", "WordPress",
)

CERTIFICATION_OPTIONS: dict[str, tuple[str, ...]] = {
    "HR": ("SHRM-CP", "SHRM-SCP", "PHR", "SPHR", "aPHR"),
    "IT": ("CompTIA A+", "Azure Fundamentals", "AWS Cloud Practitioner", "Google IT Support", "CCNA"),
    "Cybersecurity": ("Security+", "CEH", "CISSP", "CISM", "GSEC"),
    "Finance": ("ACCA", "CPA", "CFA", "CIMA", "CMA"),
    "Project Management": ("PMP", "PRINCE2", "CAPM", "PMI-ACP", "Scrum Master"),
}

EDUCATION_OPTIONS: tuple[str, ...] = ("Bachelor's", "Master's", "Above Master's")


def all_certifications() -> tuple[str, ...]:
    """Flatten the certification catalog in category order."""
    return tuple(cert for certs in CERTIFICATION_OPTIONS.values() for cert in certs)

