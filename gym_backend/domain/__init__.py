"""Pure helpers shared by repositories and services: query building, pagination, envelopes."""
