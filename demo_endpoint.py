"""
Quick demo script to run the risk assessment API locally.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting BetelSec Risk Assessment Backend")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:        GET  http://localhost:8000/health")
    print("   - Form Variants:       GET  http://localhost:8000/risk-assessment/variants")
    print("   - Risk Briefing:       POST http://localhost:8000/risk-assessment/briefings")
    print("   - Industry Suggestion: POST http://localhost:8000/industry-suggestions")
    print("   - Live Suggestions:    WS   ws://localhost:8000/industry-suggestions/ws")
    print("   - API Docs:                 http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/risk-assessment/briefings" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"variant": "company_profile", "company_name": "Acme Health", '
          '"industry": "Healthcare", "enterprise_size": "small"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "betelsec.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
