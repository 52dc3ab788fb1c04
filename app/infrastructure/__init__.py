"""Infrastructure: Firestore persistence and external API clients."""
