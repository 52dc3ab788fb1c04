"""Form handler service: form submissions to Firestore and Google Sheets."""
