# Services
